"""
Latin keystroke to polytonic Greek mapping table for greek_ime.

Principles:
- Base letter first, then marks in a fixed order:
  length (_ ^), diaeresis (+), breathing () (), accent (/ ` =), iota subscript (|)
- Every mark is an ordinary key; the matcher's longest-match rule picks the
  fullest combination typed
- "|" in front of a letter reaches the archaic and numeral letters
- Backslash is the escape marker and starts no rule
- Output uses a precomposed code point where Unicode has one, otherwise a base
  letter followed by combining marks committed as one unit

Usage:
    from greek_ime.greek import RULES, default_table
"""

from __future__ import annotations

from functools import lru_cache

from greek_ime.table import RuleTable, make_rule

# Greek characters by Unicode codepoint, for reference and readability.
_ = chr

ESCAPE = "\\"

# Combining marks used for sequences with no precomposed form.
_PSILI = _(0x0313)
_DASIA = _(0x0314)
_OXIA = _(0x0301)
_DIAERESIS = _(0x0308)

# Final sigma, used standalone and in the word-final idioms below.
_FINAL_SIGMA = _(0x03C2)

# ── Core mapping table ──────────────────────────────────────────────
# Each entry: (latin_keys, output)
# Output is a str (one committed symbol) or a tuple (several symbols).

RULES = [
    # ── Base letters ────────────────────────────────────────────────
    ("a", _(0x03B1)), ("b", _(0x03B2)), ("g", _(0x03B3)), ("d", _(0x03B4)),
    ("e", _(0x03B5)), ("z", _(0x03B6)), ("h", _(0x03B7)), ("q", _(0x03B8)),
    ("i", _(0x03B9)), ("k", _(0x03BA)), ("l", _(0x03BB)), ("m", _(0x03BC)),
    ("n", _(0x03BD)), ("c", _(0x03BE)), ("o", _(0x03BF)), ("p", _(0x03C0)),
    ("r", _(0x03C1)), ("s", _(0x03C3)), ("j", _FINAL_SIGMA), ("t", _(0x03C4)),
    ("u", _(0x03C5)), ("f", _(0x03C6)), ("x", _(0x03C7)), ("y", _(0x03C8)),
    ("w", _(0x03C9)),

    ("A", _(0x0391)), ("B", _(0x0392)), ("G", _(0x0393)), ("D", _(0x0394)),
    ("E", _(0x0395)), ("Z", _(0x0396)), ("H", _(0x0397)), ("Q", _(0x0398)),
    ("I", _(0x0399)), ("K", _(0x039A)), ("L", _(0x039B)), ("M", _(0x039C)),
    ("N", _(0x039D)), ("C", _(0x039E)), ("O", _(0x039F)), ("P", _(0x03A0)),
    ("R", _(0x03A1)), ("S", _(0x03A3)), ("T", _(0x03A4)), ("U", _(0x03A5)),
    ("F", _(0x03A6)), ("X", _(0x03A7)), ("Y", _(0x03A8)), ("W", _(0x03A9)),

    # ── Alpha ───────────────────────────────────────────────────────
    # Breathing blocks run ) ( )` (` )/ (/ )= (=
    ("a)", _(0x1F00)), ("a(", _(0x1F01)), ("a)`", _(0x1F02)), ("a(`", _(0x1F03)),
    ("a)/", _(0x1F04)), ("a(/", _(0x1F05)), ("a)=", _(0x1F06)), ("a(=", _(0x1F07)),
    ("a`", _(0x1F70)), ("a/", _(0x03AC)), ("a=", _(0x1FB6)),
    ("a_", _(0x1FB1)), ("a^", _(0x1FB0)),
    ("a|", _(0x1FB3)), ("a`|", _(0x1FB2)), ("a/|", _(0x1FB4)), ("a=|", _(0x1FB7)),
    ("a)|", _(0x1F80)), ("a(|", _(0x1F81)), ("a)`|", _(0x1F82)), ("a(`|", _(0x1F83)),
    ("a)/|", _(0x1F84)), ("a(/|", _(0x1F85)), ("a)=|", _(0x1F86)), ("a(=|", _(0x1F87)),

    ("A)", _(0x1F08)), ("A(", _(0x1F09)), ("A)`", _(0x1F0A)), ("A(`", _(0x1F0B)),
    ("A)/", _(0x1F0C)), ("A(/", _(0x1F0D)), ("A)=", _(0x1F0E)), ("A(=", _(0x1F0F)),
    ("A`", _(0x1FBA)), ("A/", _(0x0386)),
    ("A_", _(0x1FB9)), ("A^", _(0x1FB8)),
    ("A|", _(0x1FBC)),
    ("A)|", _(0x1F88)), ("A(|", _(0x1F89)), ("A)`|", _(0x1F8A)), ("A(`|", _(0x1F8B)),
    ("A)/|", _(0x1F8C)), ("A(/|", _(0x1F8D)), ("A)=|", _(0x1F8E)), ("A(=|", _(0x1F8F)),

    # ── Epsilon (no circumflex, no subscript) ───────────────────────
    ("e)", _(0x1F10)), ("e(", _(0x1F11)), ("e)`", _(0x1F12)), ("e(`", _(0x1F13)),
    ("e)/", _(0x1F14)), ("e(/", _(0x1F15)),
    ("e`", _(0x1F72)), ("e/", _(0x03AD)),

    ("E)", _(0x1F18)), ("E(", _(0x1F19)), ("E)`", _(0x1F1A)), ("E(`", _(0x1F1B)),
    ("E)/", _(0x1F1C)), ("E(/", _(0x1F1D)),
    ("E`", _(0x1FC8)), ("E/", _(0x0388)),

    # ── Eta ─────────────────────────────────────────────────────────
    ("h)", _(0x1F20)), ("h(", _(0x1F21)), ("h)`", _(0x1F22)), ("h(`", _(0x1F23)),
    ("h)/", _(0x1F24)), ("h(/", _(0x1F25)), ("h)=", _(0x1F26)), ("h(=", _(0x1F27)),
    ("h`", _(0x1F74)), ("h/", _(0x03AE)), ("h=", _(0x1FC6)),
    ("h|", _(0x1FC3)), ("h`|", _(0x1FC2)), ("h/|", _(0x1FC4)), ("h=|", _(0x1FC7)),
    ("h)|", _(0x1F90)), ("h(|", _(0x1F91)), ("h)`|", _(0x1F92)), ("h(`|", _(0x1F93)),
    ("h)/|", _(0x1F94)), ("h(/|", _(0x1F95)), ("h)=|", _(0x1F96)), ("h(=|", _(0x1F97)),

    ("H)", _(0x1F28)), ("H(", _(0x1F29)), ("H)`", _(0x1F2A)), ("H(`", _(0x1F2B)),
    ("H)/", _(0x1F2C)), ("H(/", _(0x1F2D)), ("H)=", _(0x1F2E)), ("H(=", _(0x1F2F)),
    ("H`", _(0x1FCA)), ("H/", _(0x0389)),
    ("H|", _(0x1FCC)),
    ("H)|", _(0x1F98)), ("H(|", _(0x1F99)), ("H)`|", _(0x1F9A)), ("H(`|", _(0x1F9B)),
    ("H)/|", _(0x1F9C)), ("H(/|", _(0x1F9D)), ("H)=|", _(0x1F9E)), ("H(=|", _(0x1F9F)),

    # ── Iota ────────────────────────────────────────────────────────
    ("i)", _(0x1F30)), ("i(", _(0x1F31)), ("i)`", _(0x1F32)), ("i(`", _(0x1F33)),
    ("i)/", _(0x1F34)), ("i(/", _(0x1F35)), ("i)=", _(0x1F36)), ("i(=", _(0x1F37)),
    ("i`", _(0x1F76)), ("i/", _(0x03AF)), ("i=", _(0x1FD6)),
    ("i_", _(0x1FD1)), ("i^", _(0x1FD0)),
    ("i+", _(0x03CA)), ("i+`", _(0x1FD2)), ("i+/", _(0x0390)), ("i+=", _(0x1FD7)),

    ("I)", _(0x1F38)), ("I(", _(0x1F39)), ("I)`", _(0x1F3A)), ("I(`", _(0x1F3B)),
    ("I)/", _(0x1F3C)), ("I(/", _(0x1F3D)), ("I)=", _(0x1F3E)), ("I(=", _(0x1F3F)),
    ("I`", _(0x1FDA)), ("I/", _(0x038A)),
    ("I_", _(0x1FD9)), ("I^", _(0x1FD8)),
    ("I+", _(0x03AA)),

    # ── Omicron (no circumflex, no subscript) ───────────────────────
    ("o)", _(0x1F40)), ("o(", _(0x1F41)), ("o)`", _(0x1F42)), ("o(`", _(0x1F43)),
    ("o)/", _(0x1F44)), ("o(/", _(0x1F45)),
    ("o`", _(0x1F78)), ("o/", _(0x03CC)),

    ("O)", _(0x1F48)), ("O(", _(0x1F49)), ("O)`", _(0x1F4A)), ("O(`", _(0x1F4B)),
    ("O)/", _(0x1F4C)), ("O(/", _(0x1F4D)),
    ("O`", _(0x1FF8)), ("O/", _(0x038C)),

    # ── Upsilon (capital takes dasia only) ──────────────────────────
    ("u)", _(0x1F50)), ("u(", _(0x1F51)), ("u)`", _(0x1F52)), ("u(`", _(0x1F53)),
    ("u)/", _(0x1F54)), ("u(/", _(0x1F55)), ("u)=", _(0x1F56)), ("u(=", _(0x1F57)),
    ("u`", _(0x1F7A)), ("u/", _(0x03CD)), ("u=", _(0x1FE6)),
    ("u_", _(0x1FE1)), ("u^", _(0x1FE0)),
    ("u+", _(0x03CB)), ("u+`", _(0x1FE2)), ("u+/", _(0x03B0)), ("u+=", _(0x1FE7)),

    ("U(", _(0x1F59)), ("U(`", _(0x1F5B)), ("U(/", _(0x1F5D)), ("U(=", _(0x1F5F)),
    ("U`", _(0x1FEA)), ("U/", _(0x038E)),
    ("U_", _(0x1FE9)), ("U^", _(0x1FE8)),
    ("U+", _(0x03AB)),

    # ── Omega ───────────────────────────────────────────────────────
    ("w)", _(0x1F60)), ("w(", _(0x1F61)), ("w)`", _(0x1F62)), ("w(`", _(0x1F63)),
    ("w)/", _(0x1F64)), ("w(/", _(0x1F65)), ("w)=", _(0x1F66)), ("w(=", _(0x1F67)),
    ("w`", _(0x1F7C)), ("w/", _(0x03CE)), ("w=", _(0x1FF6)),
    ("w|", _(0x1FF3)), ("w`|", _(0x1FF2)), ("w/|", _(0x1FF4)), ("w=|", _(0x1FF7)),
    ("w)|", _(0x1FA0)), ("w(|", _(0x1FA1)), ("w)`|", _(0x1FA2)), ("w(`|", _(0x1FA3)),
    ("w)/|", _(0x1FA4)), ("w(/|", _(0x1FA5)), ("w)=|", _(0x1FA6)), ("w(=|", _(0x1FA7)),

    ("W)", _(0x1F68)), ("W(", _(0x1F69)), ("W)`", _(0x1F6A)), ("W(`", _(0x1F6B)),
    ("W)/", _(0x1F6C)), ("W(/", _(0x1F6D)), ("W)=", _(0x1F6E)), ("W(=", _(0x1F6F)),
    ("W`", _(0x1FFA)), ("W/", _(0x038F)),
    ("W|", _(0x1FFC)),
    ("W)|", _(0x1FA8)), ("W(|", _(0x1FA9)), ("W)`|", _(0x1FAA)), ("W(`|", _(0x1FAB)),
    ("W)/|", _(0x1FAC)), ("W(/|", _(0x1FAD)), ("W)=|", _(0x1FAE)), ("W(=|", _(0x1FAF)),

    # ── Rho ─────────────────────────────────────────────────────────
    ("r)", _(0x1FE4)), ("r(", _(0x1FE5)), ("R(", _(0x1FEC)),

    # ── Long vowels with marks (no precomposed form) ────────────────
    ("a_)", _(0x1FB1) + _PSILI), ("a_(", _(0x1FB1) + _DASIA),
    ("a_/", _(0x1FB1) + _OXIA),
    ("a_)/", _(0x1FB1) + _PSILI + _OXIA), ("a_(/", _(0x1FB1) + _DASIA + _OXIA),
    ("i_)", _(0x1FD1) + _PSILI), ("i_(", _(0x1FD1) + _DASIA),
    ("i_/", _(0x1FD1) + _OXIA),
    ("i_)/", _(0x1FD1) + _PSILI + _OXIA), ("i_(/", _(0x1FD1) + _DASIA + _OXIA),
    ("i_+", _(0x1FD1) + _DIAERESIS), ("i_+/", _(0x1FD1) + _DIAERESIS + _OXIA),
    ("u_)", _(0x1FE1) + _PSILI), ("u_(", _(0x1FE1) + _DASIA),
    ("u_/", _(0x1FE1) + _OXIA),
    ("u_)/", _(0x1FE1) + _PSILI + _OXIA), ("u_(/", _(0x1FE1) + _DASIA + _OXIA),
    ("u_+", _(0x1FE1) + _DIAERESIS), ("u_+/", _(0x1FE1) + _DIAERESIS + _OXIA),

    # ── Word-final sigma idioms ─────────────────────────────────────
    # "s" followed by a word boundary commits final sigma and the boundary.
    ("s ", (_FINAL_SIGMA, " ")),
    ("s,", (_FINAL_SIGMA, ",")),
    ("s.", (_FINAL_SIGMA, ".")),
    ("s;", (_FINAL_SIGMA, _(0x037E))),
    ("s?", (_FINAL_SIGMA, _(0x037E))),
    ("s:", (_FINAL_SIGMA, _(0x0387))),

    # ── Punctuation ─────────────────────────────────────────────────
    (";", _(0x037E)),    # Greek question mark
    ("?", _(0x037E)),
    (":", _(0x0387)),    # ano teleia
    ("'", _(0x2019)),    # elision
    ("<<", _(0x00AB)),
    (">>", _(0x00BB)),
    ("--", _(0x2014)),

    # ── Archaic letters and numeral signs ("|" prefix) ──────────────
    ("|s", _(0x03DB)), ("|S", _(0x03DA)),    # stigma
    ("|v", _(0x03DD)), ("|V", _(0x03DC)),    # digamma
    ("|q", _(0x03DF)), ("|Q", _(0x03DE)),    # koppa
    ("|k", _(0x03D9)), ("|K", _(0x03D8)),    # archaic koppa
    ("|p", _(0x03E1)), ("|P", _(0x03E0)),    # sampi
    ("|h", _(0x0371)), ("|H", _(0x0370)),    # heta
    ("|m", _(0x03FB)), ("|M", _(0x03FA)),    # san
    ("|x", _(0x03F8)), ("|X", _(0x03F7)),    # sho
    ("|c", _(0x03F2)), ("|C", _(0x03F9)),    # lunate sigma
    ("|'", _(0x0374)),                       # numeral sign
    ("|,", _(0x0375)),                       # lower numeral sign
]


# ── Convenience accessors ───────────────────────────────────────────

def build_table(escape: str | None = ESCAPE) -> RuleTable:
    """Build a fresh RuleTable from RULES."""
    return RuleTable((make_rule(keys, out) for keys, out in RULES), escape=escape)


@lru_cache(maxsize=None)
def default_table(escape: str | None = ESCAPE) -> RuleTable:
    """Return the shared reference table (built once per escape marker)."""
    return build_table(escape)


def get_mapping_dict() -> dict[str, str]:
    """Return as a dict of latin keys -> committed Greek text."""
    return {keys: out if isinstance(out, str) else "".join(out) for keys, out in RULES}


def get_sorted_keys() -> list[str]:
    """Return latin keys sorted longest-first."""
    return sorted((keys for keys, _out in RULES), key=len, reverse=True)


# ── Quick sanity check ──────────────────────────────────────────────

if __name__ == "__main__":
    print("=== Polytonic Greek Keystroke Table ===\n")

    for keys, text in sorted(get_mapping_dict().items(), key=lambda x: (-len(x[0]), x[0])):
        print(f"  {keys:>5s} → {text!r}  {text}")

    table = default_table()
    print()
    print(table.summary())
    print(f"Keys (longest first): {get_sorted_keys()[:10]}...")
