"""Machine description reader.

A description is a text file of transition rules, one per line:

    // state  read  new_state  write  move
    0         1     0          1      R
    0         B     f          B      L   // accept at the end of the word

Comments start with // and may fill a whole line or trail a rule.
"""

from pathlib import Path

from simulator.transition_table import DIRECTIONS, TransitionRule, TransitionTable

COMMENT = "//"
FIELD_COUNT = 5


class DescriptionError(ValueError):
    """A malformed record in a machine description."""

    def __init__(self, line_number, line, reason):
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"Line {line_number}: {reason}: {line!r}")


def strip_comments(text):
    """Yield (line_number, content) for every line that still has content after removing comments."""
    for line_number, line in enumerate(text.splitlines(), start=1):
        idx = line.find(COMMENT)
        if idx != -1:
            line = line[:idx]
        line = line.strip()
        if line:
            yield line_number, line


def parse_rule(line, line_number=0):
    fields = line.split()
    if len(fields) != FIELD_COUNT:
        raise DescriptionError(line_number, line, f"expected {FIELD_COUNT} fields, got {len(fields)}")

    state, symbol, new_state, new_symbol, direction = fields
    if len(symbol) != 1:
        raise DescriptionError(line_number, line, f"tape symbol must be a single character, got {symbol!r}")
    if len(new_symbol) != 1:
        raise DescriptionError(line_number, line, f"written symbol must be a single character, got {new_symbol!r}")
    if direction not in DIRECTIONS:
        raise DescriptionError(line_number, line, f"direction must be L or R, got {direction!r}")

    return TransitionRule(state, symbol, new_state, new_symbol, direction)


def parse_description(text):
    """Parse description text into a list of TransitionRule, in file order."""
    return [parse_rule(line, line_number) for line_number, line in strip_comments(text)]


def load_description(path):
    """Read a description file and build its TransitionTable.

    Raises FileNotFoundError for a missing file, another OSError when the
    path cannot be read, and DescriptionError for a malformed record or
    bytes that are not UTF-8.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Description file not found at: {path}")
    with open(path, "rb") as f:
        data = f.read()
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        line_number = data.count(b"\n", 0, e.start) + 1
        line = data.splitlines()[line_number - 1].decode("utf-8", errors="replace")
        raise DescriptionError(line_number, line, "not valid UTF-8") from e

    rules = parse_description(text)
    return TransitionTable.build(rules)
