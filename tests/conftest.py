"""Shared fixtures."""

import pytest


class StepClock:
    """Clock that advances by a fixed step on every read, starting at 0."""

    def __init__(self, step: float = 1.0) -> None:
        self.now = -step
        self.step = step

    def __call__(self) -> float:
        self.now += self.step
        return self.now


@pytest.fixture
def step_clock() -> StepClock:
    return StepClock()
