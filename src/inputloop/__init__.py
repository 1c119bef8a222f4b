"""inputloop — prompts, choice menus and replay for interactive CLIs.

Reads one line of standard input at a time, renders indexed choice
menus, and remembers the last prompt so it can be asked again.
"""

from inputloop.cli.input_loop import InputLoop
from inputloop.core.models import Preferences, PrinterConfig
from inputloop.version import __version__

__all__: list[str] = [
    "InputLoop",
    "Preferences",
    "PrinterConfig",
    "__version__",
]
