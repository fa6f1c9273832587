import pytest


class ScriptedRandom:
    # hands out fixed draws in order and records every randint call

    def __init__(self, sequence):
        self._seq = iter(sequence)
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        return next(self._seq)


@pytest.fixture
def scripted_rng():
    return ScriptedRandom


def _rand_int(sequence):
    if isinstance(sequence, int):
        sequence = [sequence]
    seq = iter(sequence)

    def _randint(_a, _b):
        return next(seq)

    return _randint


@pytest.fixture
def rand_int():
    # stand-in for random.randint, use with monkeypatch
    return _rand_int
