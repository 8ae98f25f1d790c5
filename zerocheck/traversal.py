"""
File system traversal: walk directories and collect Solidity source files.

The analyzer only reads what this module hands it; directory walking stays
here so the engine never has to know about ignore lists or symlinks.

Typical usage:
    from pathlib import Path
    from zerocheck.traversal import iter_solidity_files

    # Every .sol file under a project, skipping node_modules, build dirs, etc.
    sources = list(iter_solidity_files(Path("./contracts")))

    # Custom ignore set
    sources = iter_solidity_files(Path("./contracts"), ignore_dirs={"mocks"})
"""

import logging
from pathlib import Path
from typing import Collection, Iterator, Optional, Set

logger = logging.getLogger(__name__)

SOLIDITY_EXTENSIONS: frozenset[str] = frozenset({".sol"})

# Default directories to ignore during traversal
DEFAULT_IGNORE_DIRS: Set[str] = {
    # Build output of the common Solidity toolchains
    "artifacts",
    "cache",
    "out",
    "build",
    "typechain",
    "typechain-types",

    # Dependency directories
    "node_modules",

    # Version control
    ".git",
    ".svn",
    ".hg",

    # IDE and editor directories
    ".vscode",
    ".idea",

    # Python tooling living next to the contracts
    "venv",
    ".venv",
    "__pycache__",
    ".pytest_cache",
}


def is_solidity_file(path: Path, extensions: Collection[str] = SOLIDITY_EXTENSIONS) -> bool:
    """
    Check if a file has one of the accepted source extensions.

    Examples:
        >>> is_solidity_file(Path("Token.sol"))
        True
        >>> is_solidity_file(Path("Token.SOL"))
        True
        >>> is_solidity_file(Path("Token.json"))
        False
    """
    return path.suffix.lower() in extensions


def should_ignore_directory(dir_path: Path, ignore_dirs: Set[str]) -> bool:
    """
    Check if a directory should be skipped (by name only, case-sensitive).

    Examples:
        >>> should_ignore_directory(Path("node_modules"), {"node_modules"})
        True
        >>> should_ignore_directory(Path("contracts"), {"node_modules"})
        False
    """
    return dir_path.name in ignore_dirs


def iter_solidity_files(
    root: Path,
    extensions: Collection[str] = SOLIDITY_EXTENSIONS,
    ignore_dirs: Optional[Set[str]] = None,
    follow_symlinks: bool = False,
) -> Iterator[Path]:
    """
    Lazily yield source files under root in a stable, depth-first order.

    Entries of each directory are visited sorted by name, so the sequence is
    the same on every run and every platform.

    Args:
        root: Root directory to start traversal from.
        extensions: Accepted file suffixes (lowercase, with the dot).
        ignore_dirs: Directory names to skip. If None, uses DEFAULT_IGNORE_DIRS.
        follow_symlinks: If False (default), symlinks are skipped.

    Raises:
        FileNotFoundError: If root does not exist.
        NotADirectoryError: If root is not a directory.
    """
    if ignore_dirs is None:
        ignore_dirs = DEFAULT_IGNORE_DIRS

    if not root.exists():
        logger.error("Root directory does not exist: %s", root)
        raise FileNotFoundError(f"Root directory does not exist: {root}")

    if not root.is_dir():
        logger.error("Root path is not a directory: %s", root)
        raise NotADirectoryError(f"Root path is not a directory: {root}")

    logger.info("Starting traversal from: %s", root)
    logger.debug(
        "Traversal config: extensions=%s, follow_symlinks=%s, ignore_dirs=%s",
        sorted(extensions),
        follow_symlinks,
        ignore_dirs,
    )

    def _walk_directory(current_dir: Path) -> Iterator[Path]:
        try:
            entries = sorted(current_dir.iterdir(), key=lambda p: p.name)
        except OSError as e:
            logger.warning("Error accessing directory %s: %s", current_dir, e)
            return

        for entry in entries:
            if entry.is_symlink() and not follow_symlinks:
                logger.debug("Skipping symlink: %s", entry)
                continue

            if entry.is_dir():
                if should_ignore_directory(entry, ignore_dirs):
                    logger.debug("Ignoring directory: %s", entry)
                    continue
                yield from _walk_directory(entry)

            elif entry.is_file() and is_solidity_file(entry, extensions):
                logger.debug("Found source file: %s", entry)
                yield entry

    count = 0
    for path in _walk_directory(root):
        count += 1
        yield path
    logger.info("Traversal complete: found %d source file(s) in %s", count, root)
