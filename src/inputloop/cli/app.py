"""CLI application entry point and command routing for inputloop.

Exposes the prompt loop to shell scripts::

    inputloop choose Start Settings Quit --close-last --loop
    inputloop ask "Your name?"

This module is the **sole error boundary** for the command-line tool.
It catches :class:`~inputloop.exceptions.InputLoopError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages on stderr and returning well-defined exit codes.
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from inputloop.cli import exit_codes
from inputloop.cli.console import console
from inputloop.core.models import Preferences
from inputloop.exceptions import InputLoopError
from inputloop.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Sub-commands:
    * ``inputloop choose OPTION...`` — show a numbered menu
    * ``inputloop ask TEXT``         — ask a free-text question
    """
    parser = argparse.ArgumentParser(
        prog="inputloop",
        description="Prompt for input and numbered menu choices on the terminal.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug details to stderr.",
    )
    subparsers = parser.add_subparsers(dest="command")

    choose = subparsers.add_parser("choose", help="Show a numbered menu and print the pick.")
    choose.add_argument("options", nargs="+", help="Menu options, indexed from 0.")
    choose.add_argument("--inline", action="store_true", help="Show all options on one line.")
    choose.add_argument("--separator", default=None, help="Separator between inline options.")
    choose.add_argument("--spacing", type=int, default=None, help="Spaces between inline options.")
    choose.add_argument(
        "--index-style",
        default=None,
        help="Two characters bracketing each index, e.g. '()'. Default: '[]'.",
    )
    choose.add_argument("--divider-top", action="store_true")
    choose.add_argument("--divider-bottom", action="store_true")
    choose.add_argument("--divider-char", default=None)
    choose.add_argument("--divider-length", type=int, default=None)
    choose.add_argument("--divider-padding", action="store_true")
    choose.add_argument(
        "--close-last",
        action="store_true",
        help="Picking the last option ends the loop.",
    )
    choose.add_argument(
        "--loop",
        action="store_true",
        help="Keep asking until the loop is closed.",
    )
    choose.add_argument("--choice", default=None, help="Answer the first prompt without reading input.")

    ask = subparsers.add_parser("ask", help="Ask a question and print the answer.")
    ask.add_argument("text", help="Question to print.")
    ask.add_argument(
        "--same-line",
        action="store_true",
        help="Read the answer on the same line as the question.",
    )
    ask.add_argument("--value", default=None, help="Answer without reading input.")
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _preferences_from_args(args: argparse.Namespace) -> Preferences:
    return Preferences(
        choice=args.choice,
        last_option_close=args.close_last,
        display_inline=args.inline,
        inline_spacing=args.spacing,
        inline_separator=args.separator,
        index_style=args.index_style,
        divider_top=args.divider_top,
        divider_bottom=args.divider_bottom,
        divider_char=args.divider_char,
        divider_length=args.divider_length,
        divider_padding=args.divider_padding,
    )


async def _handle_choose(args: argparse.Namespace) -> int:
    """Show the menu, then print each pick as ``> OPTION``.

    Without ``--loop`` one valid answer is required.  With it, every
    answer (valid or not) is followed by a replay until the loop closes.
    """
    from inputloop.cli.input_loop import InputLoop
    from inputloop.exceptions import InvalidPromptError

    loop = InputLoop()
    options: list[str] = args.options

    picked = await loop.choose(options, _preferences_from_args(args))
    while True:
        if True in picked:
            loop.out.print(f"> {options[picked.index(True)]}", True)
        elif not args.loop:
            raise InvalidPromptError(
                "The answer does not match any option.",
                hint=f"Enter a number from 0 to {len(options) - 1}.",
            )
        if not args.loop or loop.done:
            return exit_codes.SUCCESS
        picked = await loop.repeat()


async def _handle_ask(args: argparse.Namespace) -> int:
    """Ask the question and print the answer on its own line."""
    from inputloop.cli.input_loop import InputLoop

    loop = InputLoop()
    answer = await loop.question(args.text, not args.same_line, args.value)
    loop.out.print(answer, True)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the inputloop CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    if args.verbose:
        from inputloop.cli.console import configure_logging

        configure_logging()

    if args.command == "ask":
        return asyncio.run(_handle_ask(args))

    return asyncio.run(_handle_choose(args))


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except InputLoopError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
