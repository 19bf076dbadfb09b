"""Verdicts given by custom scorers and validators."""

from enum import Enum

_EXIT_ACCEPTED = 42
_EXIT_WRONG_ANSWER = 43


class Verdict(Enum):
    """Outcome of checking a contestant's answer."""

    ACCEPTED = "AC"
    WRONG_ANSWER = "WA"

    def exit_code(self):
        """Process exit status a validator reports for this verdict."""
        return _EXIT_ACCEPTED if self is Verdict.ACCEPTED else _EXIT_WRONG_ANSWER

    def __str__(self):
        return self.value