# Function classifier: turn a located function unit into a FunctionAnalysis by
# comparing its address parameters against the variables checked for address(0).

from __future__ import annotations

import re
from typing import Iterable

from zerocheck.findings.models import FunctionAnalysis, Parameter, ValidationTag
from zerocheck.locator import FunctionUnit
from zerocheck.patterns import PatternSet


def _unique(names: Iterable[str]) -> list[str]:
    """Drop repeated names, keeping first-seen order."""
    seen: set[str] = set()
    ordered: list[str] = []
    for name in names:
        if name not in seen:
            seen.add(name)
            ordered.append(name)
    return ordered


def extract_address_parameters(parameters: str, patterns: PatternSet) -> list[Parameter]:
    """
    Return every address-typed parameter in a parameter list, in textual order.

    Duplicate names are kept, as written.

    Examples:
        "address _owner, uint256 _amount, address _token"
            -> [Parameter("address", "_owner"), Parameter("address", "_token")]
        "address[] calldata _targets" -> [Parameter("address[] calldata", "_targets")]
    """
    return [
        Parameter(declared_type=m.group("type"), name=m.group("name"))
        for m in patterns.address_parameter.finditer(parameters)
    ]


def extract_body(code: str) -> str:
    """
    Return the text between the first "{" and the last "}" of code, stripped.

    Falls back to the whole (stripped) string when there is no such pair.
    """
    start = code.find("{")
    end = code.rfind("}")
    if start == -1 or end == -1 or end <= start:
        return code.strip()
    return code[start + 1 : end].strip()


def _names(pattern: re.Pattern[str], code: str) -> list[str]:
    return _unique(m.group("name") for m in pattern.finditer(code))


def extract_equality_checked(code: str, patterns: PatternSet) -> list[str]:
    """
    Variables compared with == or != against address(0) outside a require(...)
    first argument, deduplicated in first-seen order.
    """
    return _unique(
        m.group("name")
        for m in patterns.equality_check.finditer(code)
        if m.group("guard") is None
    )


def extract_require_checked(code: str, patterns: PatternSet) -> list[str]:
    """Variables checked as require(var ==/!= address(0), ...), first-seen order."""
    return _names(patterns.require_check, code)


def merge_validated(equality: Iterable[str], required: Iterable[str]) -> list[str]:
    """Equality-checked names first, then require-checked names not already present."""
    return _unique([*equality, *required])


def classify(unit: FunctionUnit, source_file: str, patterns: PatternSet) -> FunctionAnalysis:
    """
    Classify one function unit.

    The body scanned for validations is re-extracted from the unit's
    reconstructed code (first "{" to last "}"), not taken from the locator's
    capture. Tags record which rules found anything, whether or not the
    validated variable is one of the address parameters.
    """
    address_parameters = extract_address_parameters(unit.parameters, patterns)
    body = extract_body(unit.code)

    equality = extract_equality_checked(body, patterns)
    required = extract_require_checked(body, patterns)
    validated = merge_validated(equality, required)

    validated_set = set(validated)
    missing = [p.name for p in address_parameters if p.name not in validated_set]

    tags: list[ValidationTag] = []
    if equality:
        tags.append(ValidationTag.EQUALITY_CHECK)
    if required:
        tags.append(ValidationTag.REQUIRE_CHECK)

    return FunctionAnalysis(
        kind=unit.kind,
        source_file=source_file,
        raw_parameters=unit.parameters,
        reconstructed_code=unit.code,
        address_parameters=tuple(address_parameters),
        validated_names=tuple(validated),
        missing_names=tuple(missing),
        tags=tuple(tags),
    )
