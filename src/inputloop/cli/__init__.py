"""CLI layer — printing, the prompt loop, and the command-line tool.

This package is the outermost layer of the application.  It may import
from ``core`` and ``infra``, but no other layer may import from ``cli``.
"""
