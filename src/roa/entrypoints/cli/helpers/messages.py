"""Terminal message helpers for the ROA CLI.

User-visible status lines are written to stderr, prefixed with an emoji when
the stream can encode it and an ASCII marker otherwise, so stdout stays
machine-readable.
"""

import click


def _glyph(emoji: str, fallback: str) -> str:
    """Return `emoji` if stderr can encode it, else `fallback`."""
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        emoji.encode(encoding)
    except UnicodeEncodeError:
        return fallback
    return emoji


def caution_glyph() -> str:
    """Warning marker: "⚠️" or "[!]"."""
    return _glyph("⚠️", "[!]")  # pragma: no mutate


def success_glyph() -> str:
    """Success marker: "✅" or "[OK]"."""
    return _glyph("✅", "[OK]")  # pragma: no mutate


def error_glyph() -> str:
    """Error marker: "❌" or "[X]"."""
    return _glyph("❌", "[X]")  # pragma: no mutate


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr**."""
    click.secho(f"{caution_glyph()}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr**."""
    click.secho(f"{success_glyph()}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr**."""
    click.secho(f"{error_glyph()}  {msg}", fg="red", bold=True, err=True)
