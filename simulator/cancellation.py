import signal
from collections import deque


class CancelFlag:
    """Settable cancellation flag with atomic read-and-clear.

    A single pending request is held at most once, so repeated set() calls
    before the next consume() collapse into one cancellation.
    """

    def __init__(self):
        # deque append/popleft are atomic under the GIL and safe inside signal handlers
        self._pending = deque(maxlen=1)

    def set(self):
        self._pending.append(True)

    def consume(self):
        """Return True and clear the flag if a cancellation was pending."""
        try:
            self._pending.popleft()
        except IndexError:
            return False
        return True

    def is_set(self):
        return bool(self._pending)


class NeverCancel(CancelFlag):
    def set(self):
        pass

    def consume(self):
        return False


class SigintCancel(CancelFlag):
    """Cancellation source backed by SIGINT (Ctrl-C).

    Use as a context manager around a single run: the handler is installed on
    enter and the previous handler restored on exit.
    """

    def __init__(self, signum=signal.SIGINT):
        super().__init__()
        self.signum = signum
        self._previous = None

    def _handler(self, signum, frame):
        self.set()

    def __enter__(self):
        self._previous = signal.signal(self.signum, self._handler)
        return self

    def __exit__(self, exc_type, exc, tb):
        previous = self._previous if self._previous is not None else signal.SIG_DFL
        signal.signal(self.signum, previous)
        # A signal that arrived after the run finished must not leak into the next one
        self.consume()
        return False


class StepCountCancel(CancelFlag):
    """Fires on the consume() call numbered `after` (0-based), then never again."""

    def __init__(self, after):
        super().__init__()
        self.after = after
        self.polls = 0

    def consume(self):
        if self.polls == self.after:
            self.set()
        self.polls += 1
        return super().consume()
