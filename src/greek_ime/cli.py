#!/usr/bin/env python3
"""
Polytonic Greek keystroke transliterator CLI.

Reads greek_ime.toml by default if present, or override with flags:

    python -m greek_ime.cli --text "lo/gos"
    echo "mh=nin a)/eide qea/" | python -m greek_ime.cli
    python -m greek_ime.cli --lookup "a)"
    python -m greek_ime.cli --list
    python -m greek_ime.cli --summary --config greek_ime.toml
"""

import argparse
import logging
import sys

_LOGGER = logging.getLogger("greek_ime")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Polytonic Greek keystroke transliterator"
    )
    parser.add_argument(
        "--config",
        metavar="FILE",
        help="Path to TOML config file (default: auto-detect greek_ime.toml)",
    )
    parser.add_argument(
        "--escape",
        metavar="CHAR",
        help="Escape marker (overrides config; empty string disables it)",
    )
    parser.add_argument(
        "--text",
        help="Transliterate this text instead of reading stdin",
    )
    parser.add_argument(
        "--lookup",
        metavar="KEYS",
        help="Show how the table classifies a key sequence",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="Print every rule in the table",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print table statistics",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )
    args = parser.parse_args(argv)

    # ── Settings and table ───────────────────────────────────────────────

    from greek_ime.config import ConfigError, load_settings
    from greek_ime.greek import build_table
    from greek_ime.matcher import transliterate
    from greek_ime.table import RuleTableError

    try:
        settings = load_settings(args.config)
    except (FileNotFoundError, ConfigError) as e:
        parser.error(str(e))

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level_number,
        format="%(levelname)s:%(name)s:%(message)s",
    )
    if settings.source is not None:
        _LOGGER.debug("Loaded settings from %s", settings.source)

    escape = settings.escape
    if args.escape is not None:
        if len(args.escape) > 1:
            parser.error("--escape must be a single character or empty")
        escape = args.escape or None

    try:
        table = build_table(escape)
    except RuleTableError as e:
        parser.error(f"Invalid rule table: {e}")

    # ── Introspection ────────────────────────────────────────────────────

    if args.summary:
        print(table.summary())
        print()

    if args.list:
        for rule in table:
            print(f"  {''.join(rule.keys):>5s}  {rule.text}")
        print()

    if args.lookup is not None:
        result = table.lookup(args.lookup)
        if result.output is not None:
            print(f"{args.lookup!r}: {result.kind.value} -> {''.join(result.output)}")
        else:
            print(f"{args.lookup!r}: {result.kind.value}")

    if args.summary or args.list or args.lookup is not None:
        if args.text is None:
            return

    # ── Transliterate ────────────────────────────────────────────────────

    lines = [args.text] if args.text is not None else (raw.rstrip("\n") for raw in sys.stdin)
    for line in lines:
        print(transliterate(line, table=table, escape=escape))


if __name__ == "__main__":
    main()
