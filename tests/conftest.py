import pytest

from reactivity import ReactiveContext, use_context


@pytest.fixture(autouse=True)
def ctx():
    """Each test runs against its own ReactiveContext."""
    with use_context(ReactiveContext()) as context:
        yield context
