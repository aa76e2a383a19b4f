from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Optional, Tuple

LEFT = "L"
RIGHT = "R"
DIRECTIONS = (LEFT, RIGHT)


@dataclass(frozen=True)
class TransitionResult:
    new_state: str
    new_symbol: str
    direction: str

    @property
    def offset(self):
        """Head movement for this result: -1 for L, +1 for R."""
        return -1 if self.direction == LEFT else 1


@dataclass(frozen=True)
class TransitionRule:
    """One line of a machine description: (state, symbol) -> (new_state, new_symbol, direction)."""
    state: str
    symbol: str
    new_state: str
    new_symbol: str
    direction: str

    @property
    def key(self) -> Tuple[str, str]:
        return (self.state, self.symbol)

    @property
    def result(self) -> TransitionResult:
        return TransitionResult(self.new_state, self.new_symbol, self.direction)


class TransitionTable:
    """Read-only (state, symbol) -> TransitionResult lookup.

    Built once per loaded program and shared by every run. A missing key is
    not an error: it is how a machine rejects.
    """

    def __init__(self, transitions: Optional[Dict[Tuple[str, str], TransitionResult]] = None, overridden=()):
        self._transitions = dict(transitions or {})
        # Rules replaced by a later rule with the same key, in file order
        self.overridden = tuple(overridden)

    @classmethod
    def build(cls, rules: Iterable[TransitionRule]) -> "TransitionTable":
        """Build a table from parsed rules. Later rules overwrite earlier ones with the same key."""
        transitions = {}
        overridden = []
        for rule in rules:
            if rule.direction not in DIRECTIONS:
                raise ValueError(f"Direction must be 'L' or 'R', got {rule.direction!r} in {rule}")
            previous = transitions.get(rule.key)
            if previous is not None:
                overridden.append(TransitionRule(rule.state, rule.symbol, previous.new_state, previous.new_symbol, previous.direction))
            transitions[rule.key] = rule.result
        return cls(transitions, overridden)

    def lookup(self, state: str, symbol: str) -> Optional[TransitionResult]:
        return self._transitions.get((state, symbol))

    def rules(self) -> Iterator[TransitionRule]:
        for (state, symbol), result in self._transitions.items():
            yield TransitionRule(state, symbol, result.new_state, result.new_symbol, result.direction)

    def states(self):
        """Every state named by the table, as source or target."""
        found = set()
        for (state, _), result in self._transitions.items():
            found.add(state)
            found.add(result.new_state)
        return found

    def symbols(self):
        found = set()
        for (_, symbol), result in self._transitions.items():
            found.add(symbol)
            found.add(result.new_symbol)
        return found

    def __contains__(self, key):
        return key in self._transitions

    def __len__(self):
        return len(self._transitions)

    def __iter__(self):
        return self.rules()

    def __eq__(self, other):
        if not isinstance(other, TransitionTable):
            return NotImplemented
        return self._transitions == other._transitions

    def __repr__(self):
        return f"TransitionTable({len(self)} rules)"
