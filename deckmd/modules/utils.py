"""
Console and logging helpers for deckmd.
"""
import logging
import sys

from .styles import Colors

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def styled_print(text, color=None, style=None, indent=0, file=None):
    """
    Print styled text with optional color, style, and indentation.

    Args:
        text (str): Text to print
        color (str): Color from Colors class
        style (str): Style from Colors class
        indent (int): Number of spaces to indent
        file: Stream to print to (defaults to stdout)
    """
    stream = file or sys.stdout
    indent_str = " " * indent
    color_code = color or ""
    style_code = style or ""
    reset_code = Colors.RESET

    # Only apply colors if we're in a terminal that supports them
    if not (hasattr(stream, 'isatty') and stream.isatty()):
        color_code = style_code = reset_code = ""

    print(f"{indent_str}{color_code}{style_code}{text}{reset_code}", file=stream)


def print_subheader(text):
    """Print a styled subheader."""
    styled_print(f"\n{text}", Colors.CYAN, Colors.BOLD, 2)


def print_success(text, indent=0):
    """Print success message in green."""
    styled_print(text, Colors.GREEN, Colors.BOLD, indent)


def print_warning(text, indent=0):
    """Print warning message in yellow."""
    styled_print(text, Colors.YELLOW, Colors.BOLD, indent, file=sys.stderr)


def print_error(text, indent=0):
    """Print error message in red."""
    styled_print(text, Colors.RED, Colors.BOLD, indent, file=sys.stderr)


def print_info(text, indent=0):
    """Print info message in blue."""
    styled_print(text, Colors.BLUE, None, indent)


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr; DEBUG when verbose, WARNING otherwise."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
