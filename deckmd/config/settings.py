"""
Deck configuration - the fixed paths a deck run reads from and writes to.

Settings come from the optional ``.pm/deck.toml`` file under the project
root; anything it leaves out falls back to the conventional layout:

    [deck]
    deck_dir = ".pm/deck"
    overview_file = ".pm/pm.md"
    output_file = "DECK.md"
    verbose = false
"""

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import toml

from deckmd.config.paths import (
    DEFAULT_DECK_DIR,
    DEFAULT_OUTPUT_FILE,
    DEFAULT_OVERVIEW_FILE,
    get_config_path,
)
from deckmd.errors import InvalidConfigError

PATH_KEYS = ('deck_dir', 'overview_file', 'output_file')
BOOL_KEYS = ('verbose',)


def _resolve(root: Path, value: Union[str, Path]) -> Path:
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = root / path
    return path


def _relative(root: Path, path: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return str(path)


@dataclass
class DeckConfig:
    """Resolved paths for one deck run."""
    root: Path
    deck_dir: Path
    overview_file: Path
    output_file: Path
    verbose: bool = False

    @classmethod
    def default(cls, root: Union[str, Path]) -> 'DeckConfig':
        root = Path(root)
        return cls(
            root=root,
            deck_dir=root / DEFAULT_DECK_DIR,
            overview_file=root / DEFAULT_OVERVIEW_FILE,
            output_file=root / DEFAULT_OUTPUT_FILE,
        )

    @classmethod
    def load(cls, root: Union[str, Path], config_path: Optional[Path] = None) -> 'DeckConfig':
        """
        Load configuration for a project root.

        Args:
            root: Project root; relative paths in the file resolve against it
            config_path: Config file (defaults to <root>/.pm/deck.toml)

        Returns:
            Loaded DeckConfig; defaults when the file does not exist

        Raises:
            InvalidConfigError: If the file cannot be parsed or holds bad values
        """
        root = Path(root)
        if config_path is None:
            config_path = get_config_path(root)

        if not config_path.exists():
            return cls.default(root)

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = toml.load(f)
        except (toml.TomlDecodeError, OSError) as e:
            raise InvalidConfigError(f"Could not load config from {config_path}: {e}") from e
        return cls.from_dict(root, data)

    @classmethod
    def from_dict(cls, root: Union[str, Path], data: Dict[str, Any]) -> 'DeckConfig':
        """Create a DeckConfig from parsed TOML data (the [deck] table)."""
        config = cls.default(root)
        deck_data = data.get('deck', {})
        if not isinstance(deck_data, dict):
            raise InvalidConfigError("[deck] must be a table")

        for key, value in deck_data.items():
            if key in PATH_KEYS:
                if not isinstance(value, str) or not value:
                    raise InvalidConfigError(f"deck.{key} must be a non-empty string")
                config = replace(config, **{key: _resolve(config.root, value)})
            elif key in BOOL_KEYS:
                if not isinstance(value, bool):
                    raise InvalidConfigError(f"deck.{key} must be true or false")
                config = replace(config, **{key: value})
            else:
                raise InvalidConfigError(f"Unknown setting: deck.{key}")
        return config

    def to_dict(self) -> Dict[str, Any]:
        return {
            'deck': {
                'deck_dir': _relative(self.root, self.deck_dir),
                'overview_file': _relative(self.root, self.overview_file),
                'output_file': _relative(self.root, self.output_file),
                'verbose': self.verbose,
            }
        }

    def save(self, config_path: Optional[Path] = None) -> Path:
        """Save configuration as TOML and return the path written."""
        if config_path is None:
            config_path = get_config_path(self.root)

        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, 'w', encoding='utf-8') as f:
            toml.dump(self.to_dict(), f)
        return config_path

    def with_overrides(
        self,
        deck_dir: Optional[Union[str, Path]] = None,
        overview_file: Optional[Union[str, Path]] = None,
        output_file: Optional[Union[str, Path]] = None,
        verbose: Optional[bool] = None,
    ) -> 'DeckConfig':
        """Return a copy with the given non-None values applied. Relative paths resolve against root."""
        changes: Dict[str, Any] = {}
        paths = {'deck_dir': deck_dir, 'overview_file': overview_file, 'output_file': output_file}
        for key, value in paths.items():
            if value is not None:
                changes[key] = _resolve(self.root, value)
        if verbose is not None:
            changes['verbose'] = verbose
        return replace(self, **changes)
