"""Command menus and the program entry point."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable

from . import netscan, snake, sysinfo, units
from .console import Console

BANNER = (
    "        .__________________________.\n"
    "        | .___________________.  |==|\n"
    "        | |     _           _    |  |\n"
    "        | |    |_)         (_|   |  |\n"
    "        | |                      |  |\n"
    "        | |   °______________°   |  |\n"
    "        | |______________________|  |\n"
    "        !___________________________!\n"
    "         /                           \\\n"
    "        /  [][][][][][][][][][][][][]  \\\n"
    "       /  [][][][][][][][][][][][][][]  \\\n"
    "      /  [][][][][][][][][][][][][][][]  \\\n"
    "     /  [][][][][][][][][][][][][][][][]  \\\n"
    "    /  [][][][][][][][][][][][][][][][][]  \\\n"
    "   /_______________________________________\\\n"
)

_MAIN_PROMPT = (
    "Enter command (logic, arithmetic, multdiv, function,prob, gcd_lcm,permute, exit) \n"
    "**/exp/** para probrar menu de funciones exprimentales\n >>>"
)
_EXP_PROMPT = "Enter command (testing,snake,net , exit)\n >>> "

_EXPERIMENTAL: dict[str, Callable[[Console], None]] = {
    "testing": sysinfo.testing_unit,
    "net": netscan.net_unit,
    "snake": snake.snake_unit,
}


def _command_loop(console: Console, prompt: str, commands: dict) -> None:
    while True:
        console.write(prompt)
        try:
            command = console.read_token()
        except EOFError:
            return
        if command == "exit":
            return
        action = commands.get(command)
        if action is None:
            console.write("Unknown command\n")
        else:
            action(console)


def experimental_menu(console: Console | None = None) -> None:
    """Run the menu of experimental commands until ``exit``."""
    console = console if console is not None else Console()
    _command_loop(console, _EXP_PROMPT, _EXPERIMENTAL)


def start_simulation(console: Console | None = None) -> None:
    """Show the banner and run the main command menu until ``exit`` or end of input."""
    console = console if console is not None else Console()
    console.write(BANNER)
    commands = {
        "logic": units.logic_unit,
        "arithmetic": units.arithmetic_unit,
        "multdiv": units.mult_div_unit,
        "function": units.functions_unit,
        "gcd_lcm": units.gcd_lcm_unit,
        "permute": units.permute_unit,
        "prob": units.prob_unit,
        "exp": experimental_menu,
    }
    _command_loop(console, _MAIN_PROMPT, commands)


def main(argv: list[str] | None = None) -> int:
    """Start the interactive simulator."""
    parser = argparse.ArgumentParser(
        prog="ibmsim", description="Interactive calculator and toy computer simulator."
    )
    parser.parse_args(argv)
    try:
        start_simulation(Console())
    except (ValueError, ZeroDivisionError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())