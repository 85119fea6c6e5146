"""One-line status messages for the CLI.

They are written to stderr, leaving stdout to command results such as
``--json`` documents. Each line starts with an emoji, or with an ASCII
marker when the terminal's encoding cannot represent the emoji.
"""

import click

# (emoji, ASCII fallback)
CAUTION = ("⚠️", "[!]")
SUCCESS = ("✅", "[OK]")
ERROR = ("❌", "[X]")


def _supports_character(character: str) -> bool:
    """Whether stderr's encoding (ASCII when unknown) can represent `character`."""
    encoding = getattr(click.get_text_stream("stderr"), "encoding", None)
    try:
        character.encode(encoding or "ascii")
    except UnicodeEncodeError:
        return False
    return True


def _glyph(pair: tuple[str, str]) -> str:
    emoji, fallback = pair
    return emoji if _supports_character(emoji) else fallback


def caution_glyph() -> str:
    return _glyph(CAUTION)


def success_glyph() -> str:
    return _glyph(SUCCESS)


def error_glyph() -> str:
    return _glyph(ERROR)


def _status(glyph: str, msg: str, color: str) -> None:
    click.secho(f"{glyph}  {msg}", fg=color, bold=True, err=True)


def warn(msg: str) -> None:
    """Print `msg` to stderr as a bold yellow warning."""
    _status(caution_glyph(), msg, "yellow")


def success(msg: str) -> None:
    """Print `msg` to stderr as a bold green confirmation."""
    _status(success_glyph(), msg, "green")


def error(msg: str) -> None:
    """Print `msg` to stderr as a bold red error."""
    _status(error_glyph(), msg, "red")
