"""Git work tree discovery."""
from __future__ import annotations

import subprocess
from typing import Optional


def get_git_root(start: Optional[str] = None) -> Optional[str]:
    """Return git root path or None if not a git repo."""
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--show-toplevel"],
            cwd=start or None,
            capture_output=True,
            text=True,
            check=False,
        )
    except (FileNotFoundError, NotADirectoryError):
        return None

    if result.returncode != 0:
        return None
    return result.stdout.strip() or None
