# app.py

import argparse
import sys
from pathlib import Path

from rich.console import Console
from rich.prompt import Prompt

from config.config_loader import load_config
from logger.logger import JSONLogger
from simulator.cancellation import SigintCancel
from simulator.description import DescriptionError, load_description
from simulator.turing_machine import execute
from tools.ruleset_inspect import render_table

console = Console()

QUIT_COMMAND = "quit"

class WordPrompt(Prompt):
    prompt_suffix = " "

    def process_response(self, value):
        # Spaces are tape symbols too; only the line ending is dropped
        return value.rstrip("\r\n")

# === Utilities ===
def is_quit(line):
    return line.strip().lower() == QUIT_COMMAND

def print_trace(line):
    # Tape symbols are raw text, never rich markup
    console.print(line, markup=False, highlight=False, soft_wrap=True)

def report_outcome(outcome):
    if outcome.accepted:
        style = "green"
    elif outcome.kind == "rejected":
        style = "red"
    else:
        style = "yellow"
    console.print(outcome.message, style=style, markup=False, highlight=False)

def print_error(message):
    console.print(f"Error: {message}", style="red", markup=False, highlight=False, soft_wrap=True)

def run_word(word, table, config, run_logger=None):
    """Run one input word with Ctrl-C cancellation and report the outcome."""
    trace_sink = print_trace if config["show_trace"] else None

    with SigintCancel() as cancel:
        outcome = execute(word, table, trace_sink=trace_sink, cancel_signal=cancel)

    report_outcome(outcome)
    if run_logger is not None:
        run_logger.log_outcome(word, outcome)
    return outcome

def ask_program_path():
    return Prompt.ask("Please enter code file path", console=console)

def load_program(path):
    table = load_description(path)
    console.print(f"Read all code. [dim]({len(table)} rules)[/dim]")
    return table

def make_run_logger(config):
    if not config["enable_run_log"]:
        return None
    return JSONLogger(config["output_directory"], config["log_file_prefix"])

def interactive_main(table, config, run_logger=None):
    while True:
        try:
            line = WordPrompt.ask(
                "Ctrl-C to halt execution. Input word: (type quit to exit)\n >",
                console=console
            )
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        if is_quit(line):
            console.print("[bold green]Cherrio![/bold green]")
            break

        run_word(line, table, config, run_logger)

# === CLI Mode for Automation ===
def cli_main(words, table, config, run_logger=None):
    outcomes = [run_word(word, table, config, run_logger) for word in words]
    return 0 if all(outcome.accepted for outcome in outcomes) else 1

def build_parser():
    parser = argparse.ArgumentParser(description="Single-tape Turing Machine Interpreter")
    parser.add_argument("program", nargs="?", help="Path to machine description file")
    parser.add_argument("--config", help="Path to runtime config JSON (default: config/runtime_config.json)")
    parser.add_argument("--word", "-w", action="append", help="Run this input word and exit (repeatable)")
    parser.add_argument("--quiet", "-q", action="store_true", help="Do not print instantaneous descriptions")
    parser.add_argument("--inspect", action="store_true", help="Print the transition table after loading")
    return parser

def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except (OSError, ValueError, TypeError) as e:
        print_error(e)
        return 1
    if args.quiet:
        config["show_trace"] = False

    path = Path(args.program) if args.program else Path(ask_program_path())

    try:
        table = load_program(path)
    except DescriptionError as e:
        print_error(f"{path}: {e}")
        return 2
    except OSError as e:
        print_error(e)
        return 1

    if args.inspect:
        console.print(render_table(table, title=path.name))

    run_logger = make_run_logger(config)

    if args.word:
        return cli_main(args.word, table, config, run_logger)

    interactive_main(table, config, run_logger)
    return 0

if __name__ == "__main__":
    sys.exit(main())
