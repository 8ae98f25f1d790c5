from __future__ import annotations

"""
Analyzer configuration: which functions to scan and which files to visit.

The CLI in main.py builds one of these from its flags; library callers can
pass their own to analyze().
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Set

from zerocheck.traversal import DEFAULT_IGNORE_DIRS, SOLIDITY_EXTENSIONS


@dataclass
class Config:
    """
    Analyzer configuration.

    include_all_functions turns on the generic function rule; the remaining
    fields only affect directory traversal.
    """

    include_all_functions: bool = False
    extensions: FrozenSet[str] = SOLIDITY_EXTENSIONS
    ignore_dirs: Set[str] = field(default_factory=lambda: set(DEFAULT_IGNORE_DIRS))
    follow_symlinks: bool = False


def get_default_config(include_all_functions: bool = False) -> Config:
    """
    Return the default configuration: constructors and initializers only,
    .sol files, default ignore list.
    """
    return Config(include_all_functions=include_all_functions)
