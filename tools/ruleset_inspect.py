import argparse
import sys

from rich.console import Console
from rich.table import Table
from rich.text import Text

from simulator.description import DescriptionError, load_description
from simulator.turing_machine import ACCEPT_STATE, INITIAL_STATE

console = Console()

def unreachable_rules(table):
    """Rules keyed on the accepting state; the machine halts before looking them up."""
    return [rule for rule in table.rules() if rule.state == ACCEPT_STATE]

def render_table(table, title="Transition Table"):
    """Build a rich Table listing every rule in file order."""
    out = Table(title=title, show_header=True, header_style="bold magenta")
    out.add_column("State", justify="center")
    out.add_column("Read", justify="center")
    out.add_column("Next State", justify="center")
    out.add_column("Write", justify="center")
    out.add_column("Move", justify="center")

    for rule in table.rules():
        if rule.state == ACCEPT_STATE:
            style = "dim"
        elif rule.state == INITIAL_STATE:
            style = "cyan"
        else:
            style = None
        cells = (rule.state, rule.symbol, rule.new_state, rule.new_symbol, rule.direction)
        out.add_row(*(Text(cell) for cell in cells), style=style)

    return out

def inspect(path):
    table = load_description(path)
    console.print(render_table(table, title=str(path)))
    console.print(f"States: {', '.join(sorted(table.states()))}", highlight=False, markup=False)
    console.print(f"Symbols: {' '.join(sorted(table.symbols()))}", highlight=False, markup=False)

    if ACCEPT_STATE not in table.states():
        console.print(f"[yellow]Warning: no rule reaches accepting state '{ACCEPT_STATE}'.[/yellow]")
    for rule in unreachable_rules(table):
        console.print(
            f"Warning: rule ({rule.state}, {rule.symbol}) is unreachable, the machine halts in '{ACCEPT_STATE}'.",
            style="yellow", markup=False, highlight=False
        )
    for rule in table.overridden:
        console.print(
            f"Warning: rule ({rule.state}, {rule.symbol}) -> ({rule.new_state}, {rule.new_symbol}, {rule.direction}) is overridden by a later rule.",
            style="yellow", markup=False, highlight=False
        )
    return table

def main(argv=None):
    parser = argparse.ArgumentParser(description="Turing Machine Description Inspector")
    parser.add_argument("path", help="Path to machine description file")
    args = parser.parse_args(argv)

    try:
        inspect(args.path)
    except (OSError, DescriptionError) as e:
        console.print(f"Error: {e}", style="red", markup=False, highlight=False)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
