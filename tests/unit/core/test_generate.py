"""Unit tests for core/generate.py"""

import pytest

from safeslug.core.errors import BufferCapacityError, EmptyResultError
from safeslug.core.estimate import estimate_size
from safeslug.core.generate import SlugBuffer, generate
from safeslug.core.models import SlugOptions
from safeslug.core.translit import TransliterationTable


def _generate(text, table, **opts) -> bytes:
    data = text.encode("utf-8") if isinstance(text, str) else text
    options = SlugOptions(**opts)
    return generate(data, options, table, SlugBuffer(estimate_size(data, options, table)))


# --- SlugBuffer ---

def test_buffer_write_and_value():
    buffer = SlugBuffer(4)
    buffer.write(b"ab")
    buffer.write(b"cd")
    assert buffer.getvalue() == b"abcd"
    assert len(buffer) == 4
    assert buffer.last == ord("d")


def test_buffer_overrun_raises():
    """Writing past capacity raises instead of growing."""
    buffer = SlugBuffer(2)
    buffer.write(b"ab")
    with pytest.raises(BufferCapacityError, match="overran estimated capacity"):
        buffer.write(b"c")
    assert buffer.getvalue() == b"ab"


def test_buffer_pop_and_empty_last():
    buffer = SlugBuffer(1)
    assert buffer.last is None
    buffer.write(b"-")
    buffer.pop()
    assert len(buffer) == 0
    buffer.pop()
    assert len(buffer) == 0


def test_buffer_negative_capacity():
    with pytest.raises(ValueError):
        SlugBuffer(-1)


# --- generation rules ---

@pytest.mark.parametrize("text,expected", [
    ("hello   world", b"hello-world"),
    ("Hello, World!", b"hello-world"),
    ("  leading and trailing  ", b"leading-and-trailing"),
    ("multiple---hyphens", b"multiple-hyphens"),
    ("my_file_name", b"my-file-name"),
    ("a\tb\nc", b"a-b-c"),
    ("rock & roll", b"rock-and-roll"),
    ("100% sure", b"100percent-sure"),
    ("café", b"cafe"),
    ("Straße", b"strasse"),
    ("Ærøskøbing", b"aeroskobing"),
    ("Москва", b"moskva"),
    ("don’t stop", b"don-t-stop"),
    ("a – b", b"a-b"),
    ("© 2024 Acme", b"c-2024-acme"),
    ("€100", b"euro100"),
    ("snow☃man", b"snowman"),
    ("ctrl\x01chars", b"ctrlchars"),
])
def test_generate_default_options(table, text, expected):
    assert _generate(text, table) == expected


def test_generate_never_doubles_or_edges_separator(table):
    """Separator requests collapse and never lead or trail."""
    result = _generate("--a--–--b--", table)
    assert result == b"a-b"


def test_generate_custom_separator(table):
    assert _generate("Hello World-again", table, separator="_") == b"hello_world_again"


def test_generate_separator_collapse_uses_configured_byte(table):
    """With '_' as separator, '-' in input is just another separator request."""
    assert _generate("a - b", table, separator="_") == b"a_b"


def test_generate_preserve_case(table):
    assert _generate("Hello", table, preserve_case=True) == b"Hello"


def test_generate_preserve_case_keeps_raw_utf8(table):
    """preserve_case copies non-ASCII bytes verbatim instead of transliterating."""
    assert _generate("Café Crème", table, preserve_case=True) == "Café-Crème".encode("utf-8")


def test_generate_preserve_case_transliterates_ascii_mapping(table):
    """ASCII mappings still apply under preserve_case."""
    assert _generate("A&B", table, preserve_case=True) == b"AandB"


# --- max_length ---

def test_generate_truncates(table):
    assert _generate("Hello", table, max_length=3) == b"hel"


def test_generate_truncation_drops_trailing_separator(table):
    assert _generate("hello world", table, max_length=6) == b"hello"


def test_generate_max_length_larger_than_output(table):
    assert _generate("hi there", table, max_length=100) == b"hi-there"


def test_generate_max_length_cuts_replacement_partway(table):
    """A replacement that crosses max_length is cut mid-way (kept legacy behaviour)."""
    assert _generate("ab&", table, max_length=3) == b"aba"
    assert _generate("Ж", table, max_length=1) == b"z"


def test_generate_max_length_never_splits_utf8(table):
    """Raw UTF-8 that would cross max_length stops generation instead of being cut."""
    assert _generate("abécd", table, max_length=3, preserve_case=True) == b"ab"


@pytest.mark.parametrize("max_length", range(1, 12))
def test_generate_output_within_max_length(table, max_length):
    result = _generate("Straße café & ©", table, max_length=max_length)
    assert 0 < len(result) <= max_length
    assert not result.endswith(b"-")


# --- empty results ---

@pytest.mark.parametrize("text", [
    "!!!",
    "   ",
    "-_-",
    "☃☃",
    "\x01\x02",
    "ь",           # soft sign maps to ""
])
def test_generate_empty_result(table, text):
    with pytest.raises(EmptyResultError):
        _generate(text, table)


def test_generate_with_empty_table_drops_non_ascii(table):
    empty = TransliterationTable([])
    data = "café & co".encode("utf-8")
    options = SlugOptions()
    result = generate(data, options, empty, SlugBuffer(estimate_size(data, options, empty)))
    assert result == b"caf-co"
