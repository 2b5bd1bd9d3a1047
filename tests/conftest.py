import pytest

from graphgrow.core.random_source import RandomSource
from graphgrow.core.frame import FramePacer
from graphgrow.input.queue import EventQueue
from graphgrow.render.surface import RecordingSurface


class ScriptedRandomSource(RandomSource):
    """Returns pre-set values in order and checks they fit the range."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def uniform(self, low, high):
        value = self.values.pop(0)
        assert low <= value < high, f"{value} not in [{low}, {high})"
        self.calls.append((low, high))
        return value


class FakeSleep:
    def __init__(self):
        self.calls = []

    def __call__(self, seconds):
        self.calls.append(seconds)


@pytest.fixture
def fake_sleep():
    return FakeSleep()


@pytest.fixture
def pacer(fake_sleep):
    return FramePacer(1.0 / 30.0, sleep=fake_sleep)


@pytest.fixture
def surface():
    return RecordingSurface(400, 400)


@pytest.fixture
def queue():
    return EventQueue()
