# Pattern set: the regex rules used to locate functions and classify zero address checks.

import logging
import re
from enum import Enum
from typing import Mapping, Optional

from zerocheck.errors import PatternError

logger = logging.getLogger(__name__)


class RuleKind(str, Enum):
    """The six matching rules, one compiled regex each."""

    CONSTRUCTOR = "constructor"
    INITIALIZER = "initializer"
    FUNCTION = "function"
    ADDRESS_PARAMETER = "address_parameter"
    EQUALITY_CHECK = "equality_check"
    REQUIRE_CHECK = "require_check"


# Block rules match lazily up to the first closing brace, so a body holding a
# nested block is cut at the nested block's "}".
_BLOCK_FLAGS = re.MULTILINE | re.DOTALL

RULE_SOURCES: dict[RuleKind, tuple[str, int]] = {
    RuleKind.CONSTRUCTOR: (
        r"constructor\s*\((?P<params>.*?)\)\s*\{(?P<body>.*?)\}",
        _BLOCK_FLAGS,
    ),
    RuleKind.INITIALIZER: (
        r"function\s+initialize\s*\((?P<params>.*?)\)\s*[^{]*\{(?P<body>.*?)\}",
        _BLOCK_FLAGS,
    ),
    RuleKind.FUNCTION: (
        r"function\s+(?P<name>\w+)\s*\((?P<params>.*?)\)\s*[^{]*\{(?P<body>.*?)\}",
        _BLOCK_FLAGS,
    ),
    RuleKind.ADDRESS_PARAMETER: (
        r"\b(?P<type>address(?:\s*\[\])?(?:\s+(?:memory|storage|calldata))?)\s+(?P<name>\w+)",
        0,
    ),
    # A comparison written as the first argument of require( is consumed with
    # the guard group set and then skipped: it belongs to REQUIRE_CHECK.
    RuleKind.EQUALITY_CHECK: (
        r"(?P<guard>\brequire\s*\(\s*)?\b(?P<name>\w+)\s*(?:==|!=)\s*address\(0\)",
        0,
    ),
    RuleKind.REQUIRE_CHECK: (
        r"\brequire\s*\(\s*(?P<name>\w+)\s*(?:==|!=)\s*address\(0\)",
        0,
    ),
}


class PatternSet:
    """
    Immutable bundle of compiled rules, built once and passed to the locator
    and classifier explicitly.
    """

    __slots__ = ("_rules",)

    def __init__(self, rules: Mapping[RuleKind, re.Pattern[str]]) -> None:
        missing = [kind.value for kind in RuleKind if kind not in rules]
        if missing:
            raise PatternError(", ".join(missing), "rule not defined")
        object.__setattr__(self, "_rules", dict(rules))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("PatternSet is immutable")

    def __getitem__(self, kind: RuleKind) -> re.Pattern[str]:
        return self._rules[kind]

    @property
    def constructor(self) -> re.Pattern[str]:
        return self._rules[RuleKind.CONSTRUCTOR]

    @property
    def initializer(self) -> re.Pattern[str]:
        return self._rules[RuleKind.INITIALIZER]

    @property
    def function(self) -> re.Pattern[str]:
        return self._rules[RuleKind.FUNCTION]

    @property
    def address_parameter(self) -> re.Pattern[str]:
        return self._rules[RuleKind.ADDRESS_PARAMETER]

    @property
    def equality_check(self) -> re.Pattern[str]:
        return self._rules[RuleKind.EQUALITY_CHECK]

    @property
    def require_check(self) -> re.Pattern[str]:
        return self._rules[RuleKind.REQUIRE_CHECK]


def build_patterns(
    sources: Optional[Mapping[RuleKind, tuple[str, int]]] = None,
) -> PatternSet:
    """
    Compile the rule table into a PatternSet.

    Args:
        sources: Optional override of RULE_SOURCES (pattern text and flags per
                 rule). Rules missing from the override fall back to the defaults.

    Returns:
        The compiled, read-only PatternSet.

    Raises:
        PatternError: If any rule fails to compile; carries the rule name and
                      the regex engine's diagnostic.
    """
    table = dict(RULE_SOURCES)
    if sources is not None:
        table.update(sources)

    compiled: dict[RuleKind, re.Pattern[str]] = {}
    for kind, (pattern, flags) in table.items():
        try:
            compiled[kind] = re.compile(pattern, flags)
        except re.error as e:
            logger.error("Failed to compile rule %s: %s", kind.value, e)
            raise PatternError(kind.value, str(e)) from e
    logger.debug("Compiled %d rule(s)", len(compiled))
    return PatternSet(compiled)
