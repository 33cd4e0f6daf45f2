from collections import deque

import pytest

from controller import MatchController


class ScriptedRandom:
    """Random source that hands out a fixed sequence of choices."""

    def __init__(self, *values):
        self.values = deque(values)

    def choice(self, seq):
        value = self.values.popleft()
        assert value in seq, f"{value!r} is not one of {seq!r}"
        return value


@pytest.fixture
def scripted():
    """Build a MatchController whose random choices come from the given values."""
    def make(*values):
        rng = ScriptedRandom(*values)
        return MatchController(rng=rng), rng
    return make
