"""CLI layer — process boundary, rendering, and error boundary.

This package is the outermost layer of the application.  It may import
from ``core``, but ``core`` must never import from ``cli``.  It is the
only layer allowed to write to streams or decide the exit status.
"""
