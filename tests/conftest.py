from pathlib import Path

import pytest

from crisp.builtin.env_builtin import register
from crisp.interpreter import Interpreter
from crisp.types.environment import Environment


PROGRAMS = Path(__file__).parent / "programs"


@pytest.fixture
def env():
    """Fresh environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp(monkeypatch):
    """Interpreter with no prelude, whatever the caller's environment says."""
    monkeypatch.delenv("CRISP_PRELUDE", raising=False)
    return Interpreter(prelude=None)


@pytest.fixture
def programs():
    return PROGRAMS
