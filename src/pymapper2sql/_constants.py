"""Mapper directive names and fixed clause configuration."""

OVERRIDES_SEPARATOR = "|"
"""Separator between strip tokens in prefixOverrides/suffixOverrides."""

DEFAULT_PREPARED_MARKER = "?"
"""Text written in place of a #{...} placeholder."""

WHITESPACE = " \t\n\r\v\f"
"""ASCII whitespace trimmed from buffered clause content."""

# <where>: prefix, suffix, prefixOverrides, suffixOverrides
WHERE_CLAUSE = ("WHERE", "", "AND |OR ", "")

# <set>: prefix, suffix, prefixOverrides, suffixOverrides
SET_CLAUSE = ("SET", "", "", ",")

# Mapper tag names
TAG_IF = "if"
TAG_CHOOSE = "choose"
TAG_WHEN = "when"
TAG_OTHERWISE = "otherwise"
TAG_TRIM = "trim"
TAG_WHERE = "where"
TAG_SET = "set"
TAG_FOREACH = "foreach"
TAG_BIND = "bind"

STATEMENT_TAGS = frozenset({"select", "insert", "update", "delete", "sql"})
