"""Shared fixtures: config, fake upstream, client and dispatcher."""
from __future__ import annotations

import pytest

from cscart_mcp_server.api_client import CSCartClient
from cscart_mcp_server.config import Config
from cscart_mcp_server.dispatcher import Dispatcher

from .helpers import FakeUpstream, make_config


@pytest.fixture
def config() -> Config:
    return make_config()


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def client(config: Config, upstream: FakeUpstream) -> CSCartClient:
    return CSCartClient(config, http_client=upstream.http_client())


@pytest.fixture
def dispatcher(client: CSCartClient) -> Dispatcher:
    return Dispatcher(client)
