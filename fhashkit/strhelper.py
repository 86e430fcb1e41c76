"""String helpers: trimming, replacing, newline fixing, case and search."""

from __future__ import annotations

SPACES = " \t\r\n"

_ASCII_UPPER = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)
_DIGITS = "0123456789ABCDEF"


def trim_right(text: str, spaces: str = SPACES) -> str:
    """Remove trailing characters that appear in ``spaces``."""
    return text.rstrip(spaces)


def trim_left(text: str, spaces: str = SPACES) -> str:
    """Remove leading characters that appear in ``spaces``."""
    return text.lstrip(spaces)


def trim(text: str, spaces: str = SPACES) -> str:
    """Remove leading and trailing characters that appear in ``spaces``."""
    return trim_left(trim_right(text, spaces), spaces)


def replace_all(base: str, src: str, dest: str) -> str:
    """Replace every occurrence of ``src`` in ``base`` with ``dest``.

    Scanning continues after each inserted ``dest``, so replacements are
    never themselves rescanned.
    """
    if not src:
        raise ValueError("search string must not be empty")
    return base.replace(src, dest)


def fix_newline(text: str) -> str:
    """Normalise every line break to CR LF."""
    text = replace_all(text, "\n", "\r\n")
    text = replace_all(text, "\r\r\n", "\r\n")
    text = replace_all(text, "\r", "\r\n")
    return replace_all(text, "\r\n\n", "\r\n")


def str_upper(text: str) -> str:
    """Upper-case the ASCII letters of ``text``, leaving others unchanged."""
    return text.translate(_ASCII_UPPER)


def str_lower(text: str) -> str:
    """Lower-case the ASCII letters of ``text``, leaving others unchanged."""
    return text.translate(_ASCII_LOWER)


def int_to_str(num: int, base: int = 10) -> str:
    """Format ``num`` in ``base`` using upper-case digits.

    Bases above 16 are clamped to 16; bases below 2 are rejected.
    """
    base = min(base, 16)
    if base < 2:
        raise ValueError(f"base must be at least 2, got {base}")
    sign = "-" if num < 0 else ""
    num = abs(num)
    digits = []
    while True:
        num, remainder = divmod(num, base)
        digits.append(_DIGITS[remainder])
        if num == 0:
            break
    return sign + "".join(reversed(digits))


def starts_with(text: str, target: str) -> bool:
    """Return whether ``text`` begins with ``target``."""
    return text.startswith(target)


def ends_with(text: str, target: str) -> bool:
    """Return whether ``text`` ends with ``target``."""
    return text.endswith(target)


def _fold(char: str) -> str:
    upper = char.upper()
    return upper if len(upper) == 1 else char


def find_ci(text: str, sub: str) -> int:
    """Return the index of ``sub`` in ``text`` ignoring case, or -1."""
    if not text:
        return -1
    folded_text = "".join(_fold(c) for c in text)
    folded_sub = "".join(_fold(c) for c in sub)
    return folded_text.find(folded_sub)


def decode_json_utf16(text: str) -> str:
    r"""Collect the ``\uXXXX`` escapes of ``text`` into a string.

    Characters outside escapes are dropped; surrogate pairs are joined.
    """
    units = []
    i = 0
    while i + 5 < len(text):
        if text[i] == "\\" and text[i + 1] == "u":
            hex_digits = text[i + 2:i + 6]
            try:
                units.append(int(hex_digits, 16))
            except ValueError:
                raise ValueError(f"bad escape \\u{hex_digits!r}") from None
            i += 6
        else:
            i += 1
    raw = b"".join(unit.to_bytes(2, "little") for unit in units)
    return raw.decode("utf-16-le", errors="surrogatepass")