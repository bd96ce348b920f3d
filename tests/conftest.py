import os
from collections import deque
from collections.abc import Callable

import pytest

from blparse.bl_constants import END_OF_INPUT

# Subprocess runs of the CLI report coverage when the parent run asks for it
if os.getenv("COVERAGE_PROCESS_START"):
    import coverage

    coverage.process_startup()


def make_stream(*toks: str) -> deque[str]:
    return deque([*toks, END_OF_INPUT])


@pytest.fixture  # type: ignore[misc]
def stream() -> Callable[..., deque[str]]:
    """Builds a token deque from the given tokens, terminated by END_OF_INPUT."""
    return make_stream
