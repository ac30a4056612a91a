"""Shared test fixtures."""

import pytest

from greek_ime.greek import default_table
from greek_ime.matcher import Matcher
from greek_ime.table import RuleTable

ALPHA = "\u03b1"           # α
ALPHA_PSILI = "\u1f00"     # ἀ
ALPHA_PSILI_OXIA = "\u1f04"  # ἄ


@pytest.fixture
def scenario_table() -> RuleTable:
    """{a -> α, a) -> ἀ, a)/ -> ἄ}"""
    return RuleTable.from_pairs(
        [("a", ALPHA), ("a)", ALPHA_PSILI), ("a)/", ALPHA_PSILI_OXIA)],
        escape="\\",
    )


@pytest.fixture
def greek_table() -> RuleTable:
    return default_table()


@pytest.fixture
def greek_matcher(greek_table) -> Matcher:
    return Matcher(greek_table)
