"""Rule names, reporting limits and default header patterns."""

TAB = "tab"
NON_ASCII = "non-ascii"
NON_PRINTING = "non-printing"
WHITE_AT_EOL = "white-at-eol"
SVN_KEYWORD = "svn-keyword"
LONG_LINE = "long-line"
VERY_LONG_LINE = "very-long-line"
MISSING_LF = "missing-lf"
WHITE_AT_EOF = "white-at-eof"
MISSING_HEADER = "missing-header"
UNUSED_PROP = "unused-prop"

# Order matters: line rules run, and report, in this order on every line.
LINE_RULES: tuple[str, ...] = (
    TAB,
    NON_ASCII,
    NON_PRINTING,
    WHITE_AT_EOL,
    SVN_KEYWORD,
    LONG_LINE,
    VERY_LONG_LINE,
)
FILE_RULES: tuple[str, ...] = (MISSING_LF, WHITE_AT_EOF, MISSING_HEADER)
ALL_RULES: tuple[str, ...] = LINE_RULES + FILE_RULES + (UNUSED_PROP,)

# Pseudo rule used by exemption tables: the whole file is skipped.
ALL = "all"

MAX_REPORTS_PER_RULE = 10
LONG_LINE_LIMIT = 80
VERY_LONG_LINE_LIMIT = 132

BANNER_FIRST_LINE = 3
BANNER_LAST_LINE = 5
COPYRIGHT_MIN_OFFSET = 4
COPYRIGHT_MAX_OFFSET = 6

DEFAULT_BANNER_PATTERNS: tuple[str, ...] = (
    r"^\(\*.*OCaml.*\*\)$",
    r"^#.*OCaml",
    r"^\(\*.*OCamldoc.*\*\)$",
)
DEFAULT_COPYRIGHT_PATTERN = "Copyright"

DEFAULT_ATTRIBUTE = "typo"
DEFAULT_EXCLUDE_DIRS: tuple[str, ...] = (".git",)

# Values `git check-attr` prints for an attribute that carries no rule list.
ATTRIBUTE_EMPTY_VALUES = frozenset({"", "unspecified", "unset", "set"})
SENTINEL_PRUNE = "prune"
SENTINEL_BINARY = "binary"

REGISTRY_PREFIX = "typo."
TOO_MANY_TEMPLATE = "  (too many [{rule}] in this file; others will not be reported)"
