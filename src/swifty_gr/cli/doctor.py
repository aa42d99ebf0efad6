"""``swifty-gr doctor`` — environment diagnostics command.

Gathers runtime information and renders a table summarising whether
the environment satisfies swifty-gr's requirements.  Rich is used when
installed; otherwise a plain-text table is printed.
"""

from __future__ import annotations

import platform
import sys
from importlib.metadata import PackageNotFoundError, version

from swifty_gr.cli import exit_codes
from swifty_gr.cli.console import out_console, rich_available
from swifty_gr.version import __version__

MIN_PYTHON: tuple[int, int] = (3, 10)


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    python_version = platform.python_version()
    ok = tuple(sys.version_info[:2]) >= MIN_PYTHON
    required = ".".join(str(part) for part in MIN_PYTHON)
    status = "[green]OK[/green]" if ok else f"[red]FAIL (>={required} required)[/red]"
    return "Python", python_version, status


def _rich_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Rich row.

    Rich is optional at runtime, so its absence is only a warning.
    """
    if not rich_available():
        return "rich", "NOT INSTALLED", "[yellow]WARN[/yellow]"
    try:
        return "rich", version("rich"), "[green]OK[/green]"
    except PackageNotFoundError:
        return "rich", "unknown", "[green]OK[/green]"


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, "[green]OK[/green]"


def _swifty_gr_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the swifty-gr version row."""
    return "swifty-gr", __version__, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def collect_checks() -> list[tuple[str, str, str]]:
    return [
        _swifty_gr_version_check(),
        _python_version_check(),
        _rich_check(),
        _os_check(),
    ]


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\nswifty-gr doctor")
    print("=" * 56)
    print(f"{'Component':<12} {'Value':<32} {'Status':<8}")
    print("-" * 56)
    for label, value, status in checks:
        print(f"{label:<12} {value:<32} {_status_plain(status):<8}")
    print()


def _print_rich_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    from rich.table import Table

    table = Table(
        title="swifty-gr doctor",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Component", style="bold", min_width=12)
    table.add_column("Value", min_width=20)
    table.add_column("Status", justify="center", min_width=8)
    for label, value, status in checks:
        table.add_row(label, value, status)

    out_console.print()
    out_console.print(table)
    out_console.print()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all critical checks pass,
        :data:`exit_codes.GENERAL_ERROR` if a critical check fails.
    """
    checks = collect_checks()
    has_failure = any("FAIL" in status for _, _, status in checks)
    use_rich = rich_available()

    if use_rich:
        _print_rich_doctor_table(checks)
    else:
        _print_plain_doctor_table(checks)

    if has_failure:
        if use_rich:
            out_console.print("[bold red]Some checks failed.[/bold red]")
        else:
            print("Some checks failed.")
        return exit_codes.GENERAL_ERROR

    if use_rich:
        out_console.print("[bold green]All checks passed.[/bold green]")
    else:
        print("All checks passed.")
    return exit_codes.SUCCESS
