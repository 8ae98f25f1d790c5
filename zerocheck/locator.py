# Function locator: find constructors, initialize functions and (optionally) every
# other function with address parameters in raw Solidity source text.

from __future__ import annotations

import logging
from dataclasses import dataclass

from zerocheck.findings.models import FunctionKind, KindTag
from zerocheck.patterns import PatternSet

logger = logging.getLogger(__name__)

INITIALIZER_NAME = "initialize"


@dataclass(frozen=True)
class FunctionUnit:
    """
    Raw (kind, parameters, body) triple located in a file, before classification.

    `code` is rebuilt from the captured pieces rather than sliced from the file,
    so it always has the shape "<signature> { <body> }".
    """

    kind: FunctionKind
    parameters: str
    body: str
    code: str


def reconstruct_code(kind: FunctionKind, parameters: str, body: str) -> str:
    """Build "<keyword-and-signature> { <body> }" for a located function."""
    if kind.tag is KindTag.CONSTRUCTOR:
        signature = f"constructor({parameters})"
    elif kind.tag is KindTag.INITIALIZER:
        signature = f"function {INITIALIZER_NAME}({parameters})"
    else:
        signature = f"function {kind.name}({parameters})"
    return f"{signature} {{ {body} }}"


def _make_unit(kind: FunctionKind, parameters: str, body: str) -> FunctionUnit:
    parameters = parameters.strip()
    body = body.strip()
    return FunctionUnit(
        kind=kind,
        parameters=parameters,
        body=body,
        code=reconstruct_code(kind, parameters, body),
    )


def locate_functions(
    contents: str,
    patterns: PatternSet,
    include_all_functions: bool = False,
) -> list[FunctionUnit]:
    """
    Locate the function units of interest in a file's contents.

    Rules are applied one after another over the whole text: constructors,
    then initialize functions, then (only if include_all_functions) every other
    function. Matches from different rules are not deduplicated against each
    other.

    Generic matches are kept only when they are not named "initialize" (already
    reported by the initializer rule) and their parameter list contains at
    least one address parameter.

    Args:
        contents: Full text of one source file.
        patterns: Compiled rule set from build_patterns().
        include_all_functions: Also report regular functions.

    Returns:
        Function units in rule order, then source order within each rule.
        An empty list when nothing matches.
    """
    units: list[FunctionUnit] = []

    for m in patterns.constructor.finditer(contents):
        units.append(_make_unit(FunctionKind.constructor(), m.group("params"), m.group("body")))

    for m in patterns.initializer.finditer(contents):
        units.append(_make_unit(FunctionKind.initializer(), m.group("params"), m.group("body")))

    if include_all_functions:
        for m in patterns.function.finditer(contents):
            name = m.group("name")
            if name == INITIALIZER_NAME:
                continue
            params = m.group("params")
            if patterns.address_parameter.search(params) is None:
                logger.debug("Skipping function %s: no address parameters", name)
                continue
            units.append(_make_unit(FunctionKind.named(name), params, m.group("body")))

    logger.debug("Located %d function unit(s)", len(units))
    return units
