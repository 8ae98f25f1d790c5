# Analysis driver: read files, locate function units, classify them, and
# concatenate results for a single file or a whole directory tree.

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from zerocheck.classifier import classify
from zerocheck.config import Config, get_default_config
from zerocheck.errors import NotFoundError, ReadError
from zerocheck.findings.models import FunctionAnalysis
from zerocheck.locator import locate_functions
from zerocheck.patterns import PatternSet, build_patterns
from zerocheck.traversal import iter_solidity_files

logger = logging.getLogger(__name__)


def read_source(path: Path) -> str:
    """
    Read a source file as UTF-8 text.

    Raises:
        ReadError: If the file cannot be opened or is not valid UTF-8.
    """
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Failed to read file %s: %s", path, e)
        raise ReadError(path, str(e)) from e


def analyze_source(
    contents: str,
    source_file: str,
    patterns: PatternSet,
    include_all_functions: bool = False,
) -> list[FunctionAnalysis]:
    """Locate and classify every function unit in already-loaded source text."""
    units = locate_functions(contents, patterns, include_all_functions=include_all_functions)
    return [classify(unit, source_file, patterns) for unit in units]


def analyze_file(
    path: Path,
    patterns: Optional[PatternSet] = None,
    include_all_functions: bool = False,
) -> list[FunctionAnalysis]:
    """
    Analyze one file. Every result is tagged with the file's base name.

    Raises:
        NotFoundError: If path does not exist.
        ReadError: If path cannot be read.
    """
    if patterns is None:
        patterns = build_patterns()
    if not path.exists():
        raise NotFoundError(path)

    contents = read_source(path)
    results = analyze_source(contents, path.name, patterns, include_all_functions)
    logger.info("Analyzed %s: %d function(s)", path, len(results))
    return results


def _collect(paths: Iterable[Path], patterns: PatternSet, include_all_functions: bool) -> list[FunctionAnalysis]:
    results: list[FunctionAnalysis] = []
    for path in paths:
        # The first unreadable file aborts the run; nothing collected so far is returned.
        results.extend(analyze_file(path, patterns, include_all_functions))
    return results


def analyze(
    root: Path | str,
    include_all_functions: Optional[bool] = None,
    patterns: Optional[PatternSet] = None,
    config: Optional[Config] = None,
) -> list[FunctionAnalysis]:
    """
    Analyze a single file or every source file under a directory.

    Files in a directory are visited in traversal order (sorted, depth-first)
    and their results are concatenated, each file keeping its internal order.

    Args:
        root: File or directory to analyze.
        include_all_functions: Also report regular functions taking address
                               parameters. Overrides config when given.
        patterns: Compiled rule set; built with build_patterns() if None.
        config: Traversal and scan settings; get_default_config() if None.

    Returns:
        Ordered list of FunctionAnalysis; empty when nothing of interest is found.

    Raises:
        NotFoundError: If root does not exist.
        ReadError: On the first file that cannot be read.
        PatternError: If the default rule set fails to compile.
    """
    root = Path(root)
    if config is None:
        config = get_default_config()
    if include_all_functions is None:
        include_all_functions = config.include_all_functions
    if patterns is None:
        patterns = build_patterns()

    if not root.exists():
        logger.error("Path does not exist: %s", root)
        raise NotFoundError(root)

    if not root.is_dir():
        return analyze_file(root, patterns, include_all_functions)

    paths = iter_solidity_files(
        root,
        extensions=config.extensions,
        ignore_dirs=config.ignore_dirs,
        follow_symlinks=config.follow_symlinks,
    )
    results = _collect(paths, patterns, include_all_functions)
    if not results:
        logger.warning("No functions of interest found under %s", root)
    return results
