"""Tests for the reference Greek keystroke table (greek.py)."""

import pytest
from greek_ime.greek import (
    ESCAPE,
    RULES,
    build_table,
    default_table,
    get_mapping_dict,
    get_sorted_keys,
)
from greek_ime.matcher import Commit, Matcher, transliterate
from greek_ime.table import MatchKind


def _run(matcher: Matcher, keys) -> list[Commit]:
    commits = matcher.feed_all(keys)
    last = matcher.flush()
    if last is not None:
        commits.append(last)
    return commits


def _text_of(commits: list[Commit]) -> str:
    return "".join(c.text for c in commits)


# Expected Greek is written as \uXXXX escapes so that look-alike code points
# (tonos vs. oxia forms) cannot slip in unnoticed.


# ── Table invariants ──────────────────────────────────────────────────────────

def test_reference_table_has_no_duplicates():
    table = default_table()
    assert table.duplicates == 0
    assert len(table) == len(RULES)


def test_escape_starts_no_rule():
    assert all(not keys.startswith(ESCAPE) for keys, _ in RULES)
    assert default_table().lookup(ESCAPE).kind is MatchKind.NO_MATCH


def test_every_key_symbol_is_printable_ascii():
    for keys, _ in RULES:
        for k in keys:
            assert " " <= k <= "~", keys


def test_longest_key_is_four():
    assert default_table().max_key_length == 4
    assert len(get_sorted_keys()[0]) == 4


def test_default_table_is_shared():
    assert default_table() is default_table()
    assert build_table() is not default_table()


def test_mapping_dict_joins_multi_symbol_output():
    mapping = get_mapping_dict()
    assert mapping["s "] == "\u03c2 "
    assert mapping["a"] == "\u03b1"


# ── Single keys and diacritic combinations ────────────────────────────────────

@pytest.mark.parametrize("keys, expected", [
    ("a", "\u03b1"),
    ("q", "\u03b8"),
    ("c", "\u03be"),
    ("j", "\u03c2"),
    ("W", "\u03a9"),
    ("a)", "\u1f00"),
    ("a(/", "\u1f05"),
    ("A)/", "\u1f0c"),
    ("h=|", "\u1fc7"),
    ("w)=|", "\u1fa6"),
    ("W(=|", "\u1faf"),
    ("i+/", "\u0390"),
    ("u+=", "\u1fe7"),
    ("U(", "\u1f59"),
    ("r(", "\u1fe5"),
    ("e/", "\u03ad"),
    ("o`", "\u1f78"),
    ("a_", "\u1fb1"),
    ("a_)/", "\u1fb1\u0313\u0301"),
    ("i_+/", "\u1fd1\u0308\u0301"),
])
def test_key_combinations(keys, expected):
    assert transliterate(keys) == expected


def test_combining_sequence_commits_as_one_symbol():
    commits = _run(Matcher(default_table()), "u_(/")
    assert len(commits) == 1
    assert commits[0].output == ("\u1fe1\u0314\u0301",)


# ── Words and sentences ───────────────────────────────────────────────────────

def test_word_with_explicit_final_sigma():
    assert transliterate("lo/goj") == "\u03bb\u03cc\u03b3\u03bf\u03c2"


def test_word_final_sigma_before_space():
    assert transliterate("lo/gos kai/") == (
        "\u03bb\u03cc\u03b3\u03bf\u03c2 \u03ba\u03b1\u03af"
    )


def test_medial_sigma_stays_medial():
    assert transliterate("a)sth/r") == "\u1f00\u03c3\u03c4\u03ae\u03c1"


def test_sigma_idiom_emits_two_symbols():
    commits = Matcher(default_table()).feed_all("s,")
    assert len(commits) == 1
    assert commits[0].output == ("\u03c2", ",")


def test_sigma_before_question_mark():
    assert transliterate("ti/s;") == "\u03c4\u03af\u03c2\u037e"


def test_sigma_before_latin_question_mark():
    assert transliterate("ti/s?") == "\u03c4\u03af\u03c2\u037e"
    assert get_mapping_dict()["s?"] == get_mapping_dict()["s;"]


def test_iliad_opening():
    assert transliterate("mh=nin a)/eide qea/") == (
        "\u03bc\u1fc6\u03bd\u03b9\u03bd \u1f04\u03b5\u03b9\u03b4\u03b5 \u03b8\u03b5\u03ac"
    )


def test_iota_subscript_in_word():
    assert transliterate("th=| o(dw=|") == "\u03c4\u1fc7 \u1f41\u03b4\u1ff7"


def test_capital_with_breathing_and_accent():
    assert transliterate("O(/mhroj") == "\u1f4d\u03bc\u03b7\u03c1\u03bf\u03c2"


# ── Punctuation, archaic letters, escape ──────────────────────────────────────

def test_punctuation():
    assert transliterate(";") == "\u037e"
    assert transliterate(":") == "\u0387"
    assert transliterate("<<lo/goj>>") == "\u00ab\u03bb\u03cc\u03b3\u03bf\u03c2\u00bb"
    assert transliterate("a--b") == "\u03b1\u2014\u03b2"


def test_single_angle_bracket_passes_through():
    assert transliterate("<a") == "<\u03b1"
    assert transliterate("-") == "-"


def test_archaic_letters_behind_prefix():
    assert transliterate("|v") == "\u03dd"
    assert transliterate("|Q") == "\u03de"
    assert transliterate("|p") == "\u03e1"
    assert transliterate("|s") == "\u03db"


def test_archaic_prefix_before_ordinary_letter_is_literal():
    assert transliterate("|a") == "|\u03b1"


def test_subscript_mark_after_vowel_is_not_archaic_prefix():
    assert transliterate("a|v") == "\u1fb3v"


def test_escape_keeps_latin_letters():
    assert transliterate("\\a\\b") == "ab"
    assert transliterate("\\\\") == "\\"


def test_escape_before_diacritic():
    """Escaping a mark stops it combining with the preceding vowel."""
    assert transliterate("a\\)") == "\u03b1)"


def test_unmapped_keys_pass_through():
    assert transliterate("123 !") == "123 !"
    assert _text_of(_run(Matcher(default_table()), "v")) == "v"
