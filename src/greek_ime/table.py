"""
Prefix-indexed rule table for key-sequence transliteration.

A rule maps a key sequence (one-character key symbols, e.g. ``a ) /``) to an
output sequence (one or more output symbols, each a run of code points
committed as a unit).  The table stores every rule in a prefix tree so that
any key sequence can be classified in one walk:

    NO_MATCH              - no rule starts with this sequence
    PREFIX_ONLY           - some longer rule starts with it, nothing ends here
    EXACT                 - a rule ends here and nothing extends it
    EXACT_AND_EXTENDABLE  - a rule ends here and a longer rule shares it

Usage:
    from greek_ime.table import RuleTable, MatchKind

    table = RuleTable.from_pairs([("a", "α"), ("a)", "ἀ")])
    table.lookup("a").kind        # MatchKind.EXACT_AND_EXTENDABLE
    table.lookup("a)").output     # ("ἀ",)
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

_LOGGER = logging.getLogger(__name__)


# ── Errors ──────────────────────────────────────────────────────────────────

class RuleTableError(ValueError):
    """Base class for rule tables that cannot be built."""


class DuplicateKeyError(RuleTableError):
    """Two rules share a key sequence but disagree on the output."""

    def __init__(self, keys: tuple[str, ...], first: tuple[str, ...], second: tuple[str, ...]):
        self.keys = keys
        self.first = first
        self.second = second
        super().__init__(
            f"Duplicate key sequence {''.join(keys)!r}: {first!r} vs {second!r}"
        )


class EmptyRuleError(RuleTableError):
    """A rule with no keys, no output, or a malformed symbol."""


class EscapeConflictError(RuleTableError):
    """The escape marker would shadow the first key of a rule."""


# ── Data ────────────────────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class Rule:
    """One key sequence and the output it produces."""

    keys: tuple[str, ...]
    output: tuple[str, ...]

    @property
    def text(self) -> str:
        return "".join(self.output)

    def __repr__(self) -> str:
        return f"Rule({''.join(self.keys)!r} -> {self.text!r})"


class MatchKind(enum.Enum):
    NO_MATCH = "no-match"
    PREFIX_ONLY = "prefix-only"
    EXACT = "exact"
    EXACT_AND_EXTENDABLE = "exact-and-extendable"

    @property
    def is_exact(self) -> bool:
        return self in (MatchKind.EXACT, MatchKind.EXACT_AND_EXTENDABLE)

    @property
    def is_extendable(self) -> bool:
        return self in (MatchKind.PREFIX_ONLY, MatchKind.EXACT_AND_EXTENDABLE)


@dataclass(frozen=True, slots=True)
class Lookup:
    """Result of classifying a key sequence against a table."""

    kind: MatchKind
    output: tuple[str, ...] | None = None


_NO_MATCH = Lookup(MatchKind.NO_MATCH)
_PREFIX_ONLY = Lookup(MatchKind.PREFIX_ONLY)


class _Node:
    """Single node in the prefix tree."""
    __slots__ = ("children", "rule")

    def __init__(self):
        self.children: dict[str, _Node] = {}  # key symbol -> _Node
        self.rule: Rule | None = None  # set if a rule ends here


# ── Normalization helpers ───────────────────────────────────────────────────

def _as_keys(keys: str | Sequence[str]) -> tuple[str, ...]:
    """A string is split into one key symbol per character."""
    seq = tuple(keys)
    if not seq:
        raise EmptyRuleError("Rule has an empty key sequence")
    for k in seq:
        if not isinstance(k, str) or len(k) != 1:
            raise EmptyRuleError(f"Key symbol must be a single character, got {k!r}")
    return seq


def _as_output(output: str | Sequence[str]) -> tuple[str, ...]:
    """A string is one output symbol; a sequence is one symbol per item."""
    seq = (output,) if isinstance(output, str) else tuple(output)
    if not seq:
        raise EmptyRuleError("Rule has an empty output sequence")
    for sym in seq:
        if not isinstance(sym, str) or not sym:
            raise EmptyRuleError(f"Output symbol must be a non-empty string, got {sym!r}")
    return seq


def make_rule(keys: str | Sequence[str], output: str | Sequence[str]) -> Rule:
    """Build a validated Rule from loose key/output values."""
    return Rule(keys=_as_keys(keys), output=_as_output(output))


# ── Table ───────────────────────────────────────────────────────────────────

class RuleTable:
    """
    Immutable set of rules indexed by a prefix tree over key symbols.

    Construction fails with a RuleTableError subclass if the rules are
    inconsistent; once built, the table is read-only and may be shared
    between any number of matchers.
    """

    def __init__(self, rules: Iterable[Rule], escape: str | None = None):
        self._root = _Node()
        self._rules: list[Rule] = []
        self._max_key_length = 0
        self.escape = escape
        self.duplicates = 0

        for rule in rules:
            self._insert(rule)

        if escape is not None and escape in self._root.children:
            offenders = [r for r in self._rules if r.keys[0] == escape]
            raise EscapeConflictError(
                f"Escape marker {escape!r} starts {len(offenders)} rule(s), "
                f"e.g. {offenders[0]!r}"
            )

        _LOGGER.debug(
            "Built rule table: %d rules, longest key %d",
            len(self._rules), self._max_key_length,
        )

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[tuple[str | Sequence[str], str | Sequence[str]]],
        escape: str | None = None,
    ) -> RuleTable:
        """Build a table from (keys, output) pairs."""
        return cls((make_rule(keys, output) for keys, output in pairs), escape=escape)

    def _insert(self, rule: Rule) -> None:
        rule = Rule(keys=_as_keys(rule.keys), output=_as_output(rule.output))
        node = self._root
        for k in rule.keys:
            node = node.children.setdefault(k, _Node())

        if node.rule is not None:
            if node.rule.output != rule.output:
                raise DuplicateKeyError(rule.keys, node.rule.output, rule.output)
            _LOGGER.warning("Ignoring duplicate rule %r", rule)
            self.duplicates += 1
            return

        node.rule = rule
        self._rules.append(rule)
        self._max_key_length = max(self._max_key_length, len(rule.keys))

    # ── Lookup ──────────────────────────────────────────────────────────────

    def _find(self, keys: Iterable[str]) -> _Node | None:
        node = self._root
        for k in keys:
            node = node.children.get(k)
            if node is None:
                return None
        return node

    def lookup(self, keys: Iterable[str]) -> Lookup:
        """Classify a key sequence.  Never raises."""
        node = self._find(keys)
        if node is None:
            return _NO_MATCH
        if node.rule is None:
            return _PREFIX_ONLY if node.children else _NO_MATCH
        if node.children:
            return Lookup(MatchKind.EXACT_AND_EXTENDABLE, node.rule.output)
        return Lookup(MatchKind.EXACT, node.rule.output)

    def longest_prefix(self, keys: Sequence[str]) -> tuple[int, Rule | None]:
        """Return (length, rule) of the longest rule matching a prefix of keys.

        Length is 0 and rule is None if no prefix matches.
        """
        node = self._root
        best_len, best = 0, None
        for i, k in enumerate(keys):
            node = node.children.get(k)
            if node is None:
                break
            if node.rule is not None:
                best_len, best = i + 1, node.rule
        return best_len, best

    @property
    def max_key_length(self) -> int:
        """Upper bound on how many keys a matcher ever has to buffer."""
        return self._max_key_length

    # ── Mapping protocol ────────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __contains__(self, keys: object) -> bool:
        if not isinstance(keys, (str, tuple, list)):
            return False
        node = self._find(keys)
        return node is not None and node.rule is not None

    def __getitem__(self, keys: str | Sequence[str]) -> tuple[str, ...]:
        node = self._find(keys)
        if node is None or node.rule is None:
            raise KeyError(keys)
        return node.rule.output

    def summary(self) -> str:
        first_keys = {r.keys[0] for r in self._rules}
        multi = sum(1 for r in self._rules if len(r.output) > 1)
        lines = ["Rule table"]
        lines.append(f"  Rules:          {len(self._rules):,}")
        lines.append(f"  Start keys:     {len(first_keys)}")
        lines.append(f"  Longest key:    {self._max_key_length}")
        lines.append(f"  Multi-output:   {multi}")
        lines.append(f"  Escape marker:  {self.escape!r}")
        if self.duplicates:
            lines.append(f"  Duplicates:     {self.duplicates} (ignored)")
        return "\n".join(lines)
