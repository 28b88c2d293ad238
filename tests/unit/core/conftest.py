"""Shared fixtures for core unit tests"""

import pytest

from safeslug.core.models import SlugOptions
from safeslug.core.translit import TransliterationTable, default_table


SMALL_TABLE_ENTRIES = [
    (0x26, "and"),
    (0xE9, "e"),
    (0xF1, "n"),
    (0x416, "Zh"),
    (0x44C, ""),
    (0x2013, "-"),
    (0x20A3, "french franc"),
]


@pytest.fixture(name="table")
def table_fixture():
    return default_table()


@pytest.fixture(name="small_table")
def small_table_fixture():
    return TransliterationTable(SMALL_TABLE_ENTRIES)


@pytest.fixture(name="options")
def options_fixture():
    return SlugOptions()
