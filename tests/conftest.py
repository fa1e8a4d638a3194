import logging
import socket
from typing import Generator

import pytest

from sippysoft import SippySoftClient

from . import app as app_module
from . import localhost, runwsgi, util


def _get_free_port() -> int:
    with socket.socket() as s:
        s.bind((localhost, 0))
        return s.getsockname()[1]


@pytest.fixture(scope="session")
def app() -> Generator[str, None, None]:
    '''Serve the fake XML-API for the whole session.

    Yields the "host:port" the transport should talk to.
    '''
    port = _get_free_port()
    setup, teardown = runwsgi.app_runner_setup((app_module.app, port))

    class _AppState:
        pass

    state = _AppState()
    setup(state)
    yield f"{localhost}:{port}"
    teardown(state)


@pytest.fixture
def calls():
    del app_module.calls[:]
    return app_module.calls


@pytest.fixture
def transport(app) -> util.PlainDigestTransport:
    url = util.api_url(app, app_module.USERNAME, app_module.PASSWORD)
    return util.PlainDigestTransport(url, verify_ssl=False)


@pytest.fixture
def client(transport, calls) -> SippySoftClient:
    return SippySoftClient(None, transport=transport)


@pytest.fixture(autouse=True)
def _debug_logging(caplog):
    caplog.set_level(logging.DEBUG, logger="sippysoft")


@pytest.fixture
def free_port() -> int:
    "A port nothing listens on."
    return _get_free_port()
