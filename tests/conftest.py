import pytest

from Modules import CalculatorEngine


@pytest.fixture
def calc():
    """A fresh engine in its cleared state."""
    return CalculatorEngine.Calculator()


@pytest.fixture
def press_all():
    """Feed a sequence of button labels into an engine."""
    def _press_all(engine, *labels):
        for label in labels:
            engine.press(label)
        return engine
    return _press_all
