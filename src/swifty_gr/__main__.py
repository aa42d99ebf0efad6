"""Allow ``python -m swifty_gr`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m swifty_gr`` behaves identically to the ``swifty-gr``
console script.
"""

from __future__ import annotations

from swifty_gr.cli.app import cli

if __name__ == "__main__":
    cli()
