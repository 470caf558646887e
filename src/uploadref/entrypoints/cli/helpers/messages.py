"""Terminal message helpers for the uploadref CLI.

Status lines go to stderr so stdout carries only command results (parsed
names, JSON, PASS/FAIL lines). Each line starts with an emoji glyph, or an
ASCII stand-in when stderr cannot encode the emoji.
"""

import click

_GLYPHS = {
    "caution": ("⚠️", "[!]"),
    "success": ("✅", "[OK]"),
    "error": ("❌", "[X]"),
}


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr.

    The stream is looked up on every call so tests (and redirected output)
    see the current encoding.
    """
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except (UnicodeEncodeError, LookupError):
        return False
    return True


def _glyph(kind: str) -> str:
    emoji, fallback = _GLYPHS[kind]
    return emoji if _supports_character(emoji) else fallback


def caution_glyph() -> str:
    """Return "⚠️" when stderr supports it, otherwise "[!]"."""
    return _glyph("caution")


def success_glyph() -> str:
    """Return "✅" when stderr supports it, otherwise "[OK]"."""
    return _glyph("success")


def error_glyph() -> str:
    """Return "❌" when stderr supports it, otherwise "[X]"."""
    return _glyph("error")


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr**.

    Example:
        ``⚠️  Storage root does not exist yet; it will be created.``
    """
    click.secho(f"{caution_glyph()}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr**.

    Example:
        ``✅  All 3 values passed.``
    """
    click.secho(f"{success_glyph()}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr**.

    Example:
        ``❌  2 of 3 values failed.``
    """
    click.secho(f"{error_glyph()}  {msg}", fg="red", bold=True, err=True)
