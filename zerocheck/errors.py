# Error types raised by the analysis engine: missing paths, unreadable files, bad rules.

from __future__ import annotations

from pathlib import Path


class ZeroCheckError(Exception):
    """Base class for every fatal error the analyzer can raise."""


class NotFoundError(ZeroCheckError):
    """The path given to the analyzer does not exist."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"Path not found: {self.path}")


class ReadError(ZeroCheckError):
    """A file exists but its contents could not be read."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"IO error reading {self.path}: {reason}")


class PatternError(ZeroCheckError):
    """
    A matching rule failed to compile.

    Only raised while building the pattern set, before any file is touched,
    so it always points at a defect in the rule text rather than user input.
    """

    def __init__(self, rule_name: str, diagnostic: str) -> None:
        self.rule_name = rule_name
        self.diagnostic = diagnostic
        super().__init__(f"Regex error in rule {rule_name}: {diagnostic}")
