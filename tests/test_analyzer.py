"""Tests for zerocheck.analyzer: single files, directory trees and fatal errors."""

from pathlib import Path

import pytest

from zerocheck.analyzer import analyze, analyze_file, analyze_source, read_source
from zerocheck.config import Config
from zerocheck.errors import NotFoundError, ReadError
from zerocheck.findings.models import FunctionKind, KindTag, ValidationTag
from zerocheck.patterns import build_patterns

OWNED = """
contract Owned {
    constructor(address _owner, address _token) {
        require(_owner != address(0), "Invalid owner");
        owner = _owner;
        token = _token;
    }
}
"""

UPGRADEABLE = """
contract Upgradeable {
    function initialize(address _admin) external initializer {
        if (_admin == address(0)) revert ZeroAddress();
        admin = _admin;
    }

    function transfer(address _to, uint256 _amount) public {
        balances[_to] += _amount;
    }
}
"""


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_analyze_single_file(tmp_path):
    """A single file yields its constructor result tagged with the base name."""
    sol = _write(tmp_path / "Owned.sol", OWNED)
    results = analyze(sol, include_all_functions=False)
    assert len(results) == 1
    result = results[0]
    assert result.kind == FunctionKind.constructor()
    assert result.source_file == "Owned.sol"
    assert result.missing_names == ("_token",)
    assert result.tags == (ValidationTag.REQUIRE_CHECK,)


def test_analyze_accepts_str_path(tmp_path):
    """analyze() accepts a plain string path."""
    sol = _write(tmp_path / "Owned.sol", OWNED)
    assert len(analyze(str(sol), False)) == 1


def test_named_functions_only_in_all_mode(tmp_path):
    """Regular functions are reported only in all-functions mode."""
    sol = _write(tmp_path / "Upgradeable.sol", UPGRADEABLE)
    assert [r.kind.tag for r in analyze(sol, False)] == [KindTag.INITIALIZER]

    results = analyze(sol, True)
    assert [r.kind for r in results] == [FunctionKind.initializer(), FunctionKind.named("transfer")]
    transfer = results[1]
    assert transfer.missing_names == ("_to",)
    assert transfer.tags == ()


def test_config_controls_all_functions(tmp_path):
    """Config enables all-functions mode unless the argument overrides it."""
    sol = _write(tmp_path / "Upgradeable.sol", UPGRADEABLE)
    results = analyze(sol, config=Config(include_all_functions=True))
    assert len(results) == 2
    # explicit argument wins over config
    assert len(analyze(sol, False, config=Config(include_all_functions=True))) == 1


def test_analyze_directory_preserves_file_and_function_order(tmp_path):
    """Directory results follow traversal order and each file's own order."""
    _write(tmp_path / "a" / "Owned.sol", OWNED)
    _write(tmp_path / "b" / "Upgradeable.sol", UPGRADEABLE)
    _write(tmp_path / "b" / "Both.sol", OWNED + UPGRADEABLE)
    _write(tmp_path / "node_modules" / "Dep.sol", OWNED)
    _write(tmp_path / "notes.txt", OWNED)

    results = analyze(tmp_path, include_all_functions=True)
    assert [(r.source_file, r.kind.tag) for r in results] == [
        ("Owned.sol", KindTag.CONSTRUCTOR),
        ("Both.sol", KindTag.CONSTRUCTOR),
        ("Both.sol", KindTag.INITIALIZER),
        ("Both.sol", KindTag.NAMED),
        ("Upgradeable.sol", KindTag.INITIALIZER),
        ("Upgradeable.sol", KindTag.NAMED),
    ]


def test_directory_results_match_per_file_results(tmp_path):
    """A directory run equals the per-file runs concatenated."""
    patterns = build_patterns()
    first = _write(tmp_path / "A.sol", OWNED)
    second = _write(tmp_path / "B.sol", UPGRADEABLE)
    combined = analyze(tmp_path, True, patterns=patterns)
    assert combined == analyze_file(first, patterns, True) + analyze_file(second, patterns, True)


def test_file_without_matches_is_empty(tmp_path):
    """A file without functions of interest yields nothing."""
    sol = _write(tmp_path / "Lib.sol", "library Lib { function f(uint x) internal {} }")
    assert analyze(sol, True) == []


def test_non_sol_file_is_still_analyzed_when_given_directly(tmp_path):
    """An explicit file path is analyzed regardless of extension."""
    path = _write(tmp_path / "Owned.txt", OWNED)
    assert len(analyze(path, False)) == 1


def test_missing_root_raises_not_found(tmp_path):
    """A missing root raises NotFoundError."""
    with pytest.raises(NotFoundError) as excinfo:
        analyze(tmp_path / "nope.sol", False)
    assert excinfo.value.path == tmp_path / "nope.sol"
    assert "Path not found" in str(excinfo.value)


def test_analyze_file_missing_raises_not_found(tmp_path):
    """analyze_file() on a missing file raises NotFoundError."""
    with pytest.raises(NotFoundError):
        analyze_file(tmp_path / "nope.sol")


def test_unreadable_file_raises_read_error(tmp_path):
    """Invalid UTF-8 raises ReadError."""
    bad = tmp_path / "Bad.sol"
    bad.write_bytes(b"contract Bad { \xff\xfe }")
    with pytest.raises(ReadError) as excinfo:
        read_source(bad)
    assert excinfo.value.path == bad


def test_unreadable_file_aborts_directory_run(tmp_path):
    """The first unreadable file aborts a directory run."""
    _write(tmp_path / "A.sol", OWNED)
    (tmp_path / "B.sol").write_bytes(b"\xff\xfe\x00")
    _write(tmp_path / "C.sol", OWNED)
    with pytest.raises(ReadError):
        analyze(tmp_path, False)


def test_analyze_source_tags_file_name():
    """analyze_source() tags results with the given file name."""
    results = analyze_source(OWNED, "Inline.sol", build_patterns())
    assert [r.source_file for r in results] == ["Inline.sol"]
