from unittest.mock import AsyncMock, MagicMock

import pytest


def _make_response(status: int, body: str) -> MagicMock:
    """An object usable as `async with session.post(...) as response`."""
    response = MagicMock()
    response.status = status
    response.text = AsyncMock(return_value=body)

    ctx = MagicMock()
    ctx.__aenter__ = AsyncMock(return_value=response)
    ctx.__aexit__ = AsyncMock(return_value=None)
    return ctx


@pytest.fixture
def make_response():
    return _make_response


@pytest.fixture
def mock_session():
    session = MagicMock()
    session.closed = False
    session.close = AsyncMock()
    session.post = MagicMock(return_value=_make_response(200, "{}"))
    return session
