"""swifty-gr — command-line entry point scaffold.

An explicit option schema, a pure argument parser, a command dispatcher
and a single process-boundary entry point.
"""

from swifty_gr.version import __version__

__all__: list[str] = ["__version__"]
