"""Pytest fixtures for reqrespy tests."""
import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from reqrespy.core.session import Credential, MemorySession


def make_response(status=200, body=None, text=None, raw=None):
    """
    Build an async context manager yielding a fake aiohttp response.
    
    The body is ``raw`` bytes when given, else ``text`` or ``body`` as JSON,
    encoded as UTF-8.
    """
    if raw is None:
        if text is None:
            text = json.dumps(body) if body is not None else ''
        raw = text.encode('utf-8')
    
    response = MagicMock()
    response.status = status
    response.read = AsyncMock(return_value=raw)
    
    ctx = MagicMock()
    ctx.__aenter__ = AsyncMock(return_value=response)
    ctx.__aexit__ = AsyncMock(return_value=None)
    return ctx


def make_http_session(*responses):
    """
    Mock aiohttp.ClientSession answering ``request`` calls in order.
    
    Each item is either a context manager from make_response or an
    exception to raise when the request is issued.
    """
    session = MagicMock()
    session.closed = False
    session.close = AsyncMock()
    session.request = MagicMock(side_effect=list(responses))
    return session


@pytest.fixture
def token():
    return 'test-access-token'


@pytest.fixture
def logged_in_store(token):
    """Memory store already holding a credential."""
    return MemorySession(Credential(token=token))


@pytest.fixture
def empty_store():
    return MemorySession()


@pytest.fixture
def janet():
    """The record reqres serves for user 2."""
    return {
        'id': 2,
        'first_name': 'Janet',
        'last_name': 'Weaver',
        'email': 'janet.weaver@reqres.in',
    }


@pytest.fixture
def users_page_payload(janet):
    """A list response as returned by GET /users?page=1."""
    return {
        'page': 1,
        'per_page': 6,
        'total': 12,
        'total_pages': 2,
        'data': [
            {
                'id': 1,
                'first_name': 'George',
                'last_name': 'Bluth',
                'email': 'george.bluth@reqres.in',
                'avatar': 'https://reqres.in/img/faces/1-image.jpg',
            },
            janet,
        ],
    }


@pytest.fixture
def response():
    """Factory for fake responses, see make_response."""
    return make_response


@pytest.fixture
def http_session():
    """Factory for mock aiohttp sessions, see make_http_session."""
    return make_http_session
