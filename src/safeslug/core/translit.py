"""Transliteration lookup: sorted codepoint table with binary search"""

import logging
from bisect import bisect_left
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Optional

import yaml

from safeslug.core.utf8 import MAX_CODEPOINT


logger = logging.getLogger(__name__)

DEFAULT_TABLE_PATH = Path(__file__).resolve().parent.parent / "data" / "transliteration.yaml"


class TransliterationTable:
    """Read-only (codepoint, ascii) pairs kept in ascending codepoint order.

    The order is a data contract of the asset: entries are checked once at
    construction and never sorted here, so a mis-ordered file fails loudly.
    """

    def __init__(self, entries: Iterable[tuple[int, str]]):
        keys: list[int] = []
        values: list[str] = []
        for codepoint, ascii_text in entries:
            if not isinstance(codepoint, int) or isinstance(codepoint, bool):
                raise ValueError(f"Transliteration key must be an integer codepoint, got {codepoint!r}")
            if not 0 < codepoint <= MAX_CODEPOINT:
                raise ValueError(f"Transliteration key out of range: {codepoint:#x}")
            if keys and codepoint <= keys[-1]:
                raise ValueError(
                    f"Transliteration table not strictly ascending at {codepoint:#x} (after {keys[-1]:#x})"
                )
            if not isinstance(ascii_text, str) or not ascii_text.isascii():
                raise ValueError(f"Transliteration value for {codepoint:#x} must be an ASCII string")
            keys.append(codepoint)
            values.append(ascii_text)
        self._keys = tuple(keys)
        self._values = tuple(values)

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, codepoint: int) -> bool:
        return self.lookup(codepoint) is not None

    def lookup(self, codepoint: int) -> Optional[str]:
        """Return the ASCII replacement for codepoint, or None. "" is a valid replacement."""
        i = bisect_left(self._keys, codepoint)
        if i < len(self._keys) and self._keys[i] == codepoint:
            return self._values[i]
        return None


def load_table(path: Path = DEFAULT_TABLE_PATH) -> TransliterationTable:
    """Load a YAML mapping of codepoint -> ASCII text, preserving file order."""
    try:
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid transliteration table {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Invalid transliteration table {path}: expected a mapping, got {type(data).__name__}")
    table = TransliterationTable(data.items())
    logger.debug("Loaded %d transliteration entries from %s", len(table), path)
    return table


@lru_cache(maxsize=1)
def default_table() -> TransliterationTable:
    """Bundled table, loaded once and shared by every conversion in the process."""
    return load_table(DEFAULT_TABLE_PATH)
