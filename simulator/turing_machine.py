from dataclasses import dataclass
from typing import Callable, Dict, Optional

from simulator.cancellation import NeverCancel
from simulator.transition_table import TransitionTable

BLANK = "B"
INITIAL_STATE = "0"
ACCEPT_STATE = "f"


def get_from_tape(tape, location):
    """Symbol at `location`; cells never written hold the blank."""
    return tape.get(location, BLANK)


def tape_bounds(tape, location):
    """Leftmost and rightmost index of the trace window, widened to include the head."""
    return min(min(tape), location), max(max(tape), location)


def format_id(tape, state, location):
    """Render the instantaneous description of a machine.

    The window spans every written cell and the head. The head cell is shown
    as |q<state>=><symbol>|. Returns None when nothing has been written.
    """
    if not tape:
        return None
    minimum, maximum = tape_bounds(tape, location)

    cells = []
    for i in range(minimum, maximum + 1):
        value = get_from_tape(tape, i)
        if i == location:
            cells.append(f"|q{state}=>{value}|")
        else:
            cells.append(value)
    return "".join(cells)


@dataclass(frozen=True)
class Outcome:
    """Final configuration of one run."""
    state: str
    head: int
    tape: Dict[int, str]
    steps: int

    @property
    def kind(self):
        return type(self).__name__.lower()

    @property
    def accepted(self):
        return False

    def tape_string(self):
        """Written cells from leftmost to rightmost, without the head marker."""
        if not self.tape:
            return ""
        return "".join(get_from_tape(self.tape, i) for i in range(min(self.tape), max(self.tape) + 1))


@dataclass(frozen=True)
class Accepted(Outcome):
    @property
    def accepted(self):
        return True

    @property
    def message(self):
        return "Accepted!"


@dataclass(frozen=True)
class Rejected(Outcome):
    symbol: Optional[str] = None

    def __post_init__(self):
        if self.symbol is None:
            raise TypeError("Rejected requires the symbol under the head")

    @property
    def message(self):
        return f"Rejected! No out transitions for input ({self.state}, {self.symbol})"


@dataclass(frozen=True)
class Interrupted(Outcome):
    @property
    def message(self):
        return "Interrupted!"


class TuringMachine:
    """Single-tape deterministic machine over a sparse tape.

    Starts in state "0" with the head on cell 0 and halts by accepting in
    state "f" or by rejecting when no transition matches.
    """

    def __init__(self, table: TransitionTable, input_word=""):
        self.table = table
        self.reset(input_word)

    def reset(self, input_word=""):
        self.tape = {idx: c for idx, c in enumerate(input_word)}
        self.head = 0
        self.current_state = INITIAL_STATE
        self.steps = 0

    def read(self):
        return get_from_tape(self.tape, self.head)

    def instantaneous_description(self):
        return format_id(self.tape, self.current_state, self.head)

    def step(self) -> Optional[Outcome]:
        """Apply one transition.

        Returns the terminal Outcome if the machine halts here instead of
        moving, otherwise None. The accepting state is checked before any
        lookup, so rules keyed on "f" never fire.
        """
        if self.current_state == ACCEPT_STATE:
            return self._outcome(Accepted)

        symbol = self.read()
        result = self.table.lookup(self.current_state, symbol)
        if result is None:
            return self._outcome(Rejected, symbol=symbol)

        self.tape[self.head] = result.new_symbol
        self.current_state = result.new_state
        self.head += result.offset
        self.steps += 1
        return None

    def run(self, trace_sink: Optional[Callable[[str], None]] = None, cancel_signal=None) -> Outcome:
        """Run until accept, reject or cancellation.

        The cancel signal is polled once per step, before the trace and the
        transition, so a step is never left half-applied.
        """
        if cancel_signal is None:
            cancel_signal = NeverCancel()

        while True:
            if cancel_signal.consume():
                return self._outcome(Interrupted)

            if trace_sink is not None:
                line = self.instantaneous_description()
                if line is not None:
                    trace_sink(line)

            outcome = self.step()
            if outcome is not None:
                return outcome

    def _outcome(self, kind, **extra):
        return kind(
            state=self.current_state,
            head=self.head,
            tape=dict(self.tape),
            steps=self.steps,
            **extra
        )


def execute(input_word, table, trace_sink=None, cancel_signal=None) -> Outcome:
    """Run `table` on a fresh tape holding `input_word`."""
    return TuringMachine(table, input_word).run(trace_sink=trace_sink, cancel_signal=cancel_signal)
