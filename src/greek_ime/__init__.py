"""greek-ime: longest-match keystroke transliteration into polytonic Greek."""

from greek_ime.table import (
    RuleTable, Rule, Lookup, MatchKind,
    RuleTableError, DuplicateKeyError, EmptyRuleError, EscapeConflictError,
)
from greek_ime.matcher import Matcher, MatchState, Commit, transliterate
from greek_ime.greek import ESCAPE, RULES, build_table, default_table
from greek_ime.config import Settings, ConfigError, load_settings

__all__ = [
    "RuleTable", "Rule", "Lookup", "MatchKind",
    "RuleTableError", "DuplicateKeyError", "EmptyRuleError", "EscapeConflictError",
    "Matcher", "MatchState", "Commit", "transliterate",
    "ESCAPE", "RULES", "build_table", "default_table",
    "Settings", "ConfigError", "load_settings",
]
