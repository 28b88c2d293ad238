"""C-locale ASCII character classes operating on byte values"""

import string


WHITESPACE = frozenset(string.whitespace.encode("ascii"))
PUNCTUATION = frozenset(string.punctuation.encode("ascii"))
ALNUM = frozenset((string.ascii_letters + string.digits).encode("ascii"))


def is_alnum(b: int) -> bool:
    return b in ALNUM


def is_separator_like(b: int) -> bool:
    """Whitespace or punctuation; both collapse into a single separator."""
    return b in WHITESPACE or b in PUNCTUATION


def to_lower(b: int) -> int:
    """Lowercase an ASCII letter byte; any other byte is returned unchanged."""
    return b | 0x20 if 0x41 <= b <= 0x5A else b
