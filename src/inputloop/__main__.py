"""Run the prompt tool as ``python -m inputloop``.

Same entry point as the ``inputloop`` console script, error boundary
included.
"""

from __future__ import annotations

from inputloop.cli.app import cli

if __name__ == "__main__":
    cli()
