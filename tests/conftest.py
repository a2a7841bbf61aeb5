import io

import pytest

from zenlisp.reader.parser import parse
from zenlisp.evaluation.evaluator import evaluate
from zenlisp.types.environment import Environment


@pytest.fixture
def output():
    """Captures whatever the print form writes."""
    return io.StringIO()


@pytest.fixture
def env(output):
    """Fresh root environment with no bindings."""
    return Environment(output=output)


@pytest.fixture
def run(env):
    """Parse and evaluate source text in the shared `env` fixture."""
    def _run(source):
        return evaluate(parse(source), env)
    return _run
