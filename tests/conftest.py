from collections.abc import Iterable

import pytest


class ScriptedRandom:
    """Random source that hands out a fixed sequence of values."""

    def __init__(self, values: Iterable[int]):
        self._values = list(values)
        self.calls: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        if not self._values:
            raise AssertionError(f"ScriptedRandom exhausted on randint({a}, {b})")
        value = self._values.pop(0)
        assert a <= value <= b, f"scripted value {value} outside [{a}, {b}]"
        return value

    @property
    def remaining(self) -> int:
        return len(self._values)


@pytest.fixture
def scripted():
    return ScriptedRandom
