"""Terminal message helpers for the shellsplit CLI.

Status lines go to stderr with an emoji glyph, or an ASCII fallback when the
stream cannot encode it, so stdout stays clean for split/join output.
"""

import click


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr.

    Decides whether status lines use an emoji glyph or fall back to ASCII, so
    terminals without UTF-8 never raise `UnicodeEncodeError`.

    Args:
        character: A single Unicode character to check (e.g. "✅", "❌").

    Returns:
        bool: True if encoding succeeds; False on `UnicodeEncodeError`.
    """

    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def _glyph(emoji: str, fallback: str) -> str:
    """Return *emoji* when stderr can encode it, otherwise *fallback*."""
    return emoji if _supports_character(emoji) else fallback


def success_glyph() -> str:
    """Return "✅", or "[OK]" when stderr cannot encode it."""
    return _glyph("✅", "[OK]")  # pragma: no mutate


def error_glyph() -> str:
    """Return "❌", or "[X]" when stderr cannot encode it."""
    return _glyph("❌", "[X]")  # pragma: no mutate


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr**.

    Example:
        ``✅  Round trip OK (3 words).``
    """
    click.secho(f"{success_glyph()}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr**.

    Example:
        ``❌  Unmatched ' quote at line 1, column 6``
    """
    click.secho(f"{error_glyph()}  {msg}", fg="red", bold=True, err=True)
