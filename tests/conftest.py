import random

import pytest


class ScriptedRandom(random.Random):
    """Hands out queued values in order instead of drawing them."""

    def __init__(self, values):
        super().__init__(0)
        self.values = list(values)

    def _pop(self):
        assert self.values, "scripted random source ran out of values"
        return self.values.pop(0)

    def randint(self, a, b):
        v = self._pop()
        assert a <= v <= b, f"{v} not in [{a}, {b}]"
        return v

    def choice(self, seq):
        v = self._pop()
        assert v in seq, f"{v} not in {list(seq)}"
        return v


@pytest.fixture
def scripted():
    return ScriptedRandom
