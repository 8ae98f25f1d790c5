"""Tests for the Rich console report and summary counts."""

from rich.console import Console

from zerocheck.analyzer import analyze_source
from zerocheck.patterns import build_patterns
from zerocheck.reporting.console import (
    NO_RESULTS_MESSAGE,
    print_report,
    print_results,
    print_summary,
    summarize,
)

SOURCE = """
contract Mixed {
    constructor(address _owner, address _token) {
        require(_owner != address(0), "Invalid owner");
    }

    function initialize(address _admin) public {
        if (_admin == address(0)) revert();
    }

    function transfer(address _to, uint256 _amount) public {
        balances[_to] += _amount;
    }

    function setFeeTo(address _feeTo) external {
        feeTo = _feeTo;
    }
}
"""


def _results():
    return analyze_source(SOURCE, "Mixed.sol", build_patterns(), include_all_functions=True)


def _console() -> Console:
    return Console(record=True, width=120, color_system=None)


def _render(result) -> str:
    """Print a single result and return the recorded text."""
    console = _console()
    print_results([result], console)
    return console.export_text()


def test_summarize_counts():
    """Functions are counted as fully, partially or not validated."""
    summary = summarize(_results())
    assert summary.total == 4
    assert summary.with_address_parameters == 4
    assert summary.fully_validated == 1
    assert summary.partially_validated == 1
    assert summary.unvalidated == 2


def test_print_results_shows_missing_and_validated():
    """The full report lists address arguments, checks found and missing checks."""
    console = _console()
    print_results(_results(), console)
    out = console.export_text()
    assert "Constructor in Mixed.sol" in out
    assert "Found 2 address argument(s): address _owner, address _token" in out
    assert "require() statement with zero address check" in out
    assert "Missing zero address validation for:" in out
    assert "Argument: _token" in out
    assert "All address arguments are validated!" in out
    assert "Function 'transfer' in Mixed.sol" in out
    assert "No zero address validation detected for any argument" in out


def test_unvalidated_function_reports_no_validation():
    """A function with no checks at all lists its arguments and says nothing was validated."""
    transfer = _results()[2]
    out = _render(transfer)
    assert "Missing zero address validation for:" in out
    assert "Argument: _to" in out
    assert "No zero address validation detected for any argument" in out
    assert "All address arguments are validated!" not in out


def test_partially_validated_function_omits_no_validation_message():
    """A function with some checks does not claim that nothing was validated."""
    constructor = _results()[0]
    out = _render(constructor)
    assert "Argument: _token" in out
    assert "No zero address validation detected for any argument" not in out


def test_fully_validated_function():
    """A function with every argument checked shows the all-validated message only."""
    initializer = _results()[1]
    out = _render(initializer)
    assert "✅ All address arguments are validated!" in out
    assert "Missing zero address validation" not in out
    assert "No zero address validation detected" not in out


def test_print_results_empty():
    """An empty result list prints the nothing-found message."""
    console = _console()
    print_results([], console)
    assert NO_RESULTS_MESSAGE in console.export_text()


def test_print_summary_panel():
    """The summary panel lists every count."""
    console = _console()
    print_summary(_results(), console)
    out = console.export_text()
    assert "Analysis Summary" in out
    assert "Total functions analyzed" in out
    assert "Partially validated" in out


def test_print_summary_empty_prints_nothing():
    """print_summary() alone prints nothing for an empty result list."""
    console = _console()
    print_summary([], console)
    assert console.export_text() == ""


def test_summary_only_report_skips_details():
    """Summary-only mode prints the panel without per-function blocks."""
    console = _console()
    print_report(_results(), summary_only=True, console=console)
    out = console.export_text()
    assert "Analysis Summary" in out
    assert "Missing zero address validation" not in out


def test_summary_only_report_empty_says_nothing_found():
    """Summary-only mode still reports that nothing was found."""
    console = _console()
    print_report([], summary_only=True, console=console)
    out = console.export_text()
    assert NO_RESULTS_MESSAGE in out
    assert "Analysis Summary" not in out
