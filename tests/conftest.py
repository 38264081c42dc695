"""Shared pytest fixtures.

HTTP never leaves the process: the `trello` fixture installs a request
processor whose client talks to `FakeTrello` through `httpx.MockTransport`.
"""

import json
from pathlib import Path

import httpx
import pytest
from typer.testing import CliRunner

from tests.fixtures.trello_api import TEST_AUTH, FakeTrello
from trellokit.core.auth import TrelloAuthorization
from trellokit.core.cache import get_cache
from trellokit.core.config import ENV_OVERRIDES, TrelloKitConfig, reset_config, set_config
from trellokit.rest.client import TrelloRestClient
from trellokit.rest.processor import RestRequestProcessor, set_request_processor


@pytest.fixture(autouse=True)
def _isolate(monkeypatch):
    """Keep every test away from real config files, env vars and shared state."""
    for env_var, _section, _key in ENV_OVERRIDES:
        monkeypatch.delenv(env_var, raising=False)
    set_config(TrelloKitConfig())
    TrelloAuthorization.set_default(TEST_AUTH)
    get_cache().clear()
    yield
    get_cache().clear()
    TrelloAuthorization.set_default(None)
    set_request_processor(None)
    reset_config()


@pytest.fixture
def trello():
    """Provide a FakeTrello wired into the process-wide request processor."""
    fake = FakeTrello()
    client = TrelloRestClient(transport=httpx.MockTransport(fake.handler))
    processor = RestRequestProcessor(client, auth=TEST_AUTH)
    set_request_processor(processor)
    yield fake
    processor.shut_down()


@pytest.fixture
def temp_dir(tmp_path) -> Path:
    """Provide a temporary directory."""
    return tmp_path


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a typer CLI runner."""
    return CliRunner()


@pytest.fixture
def credentials_file(temp_dir) -> Path:
    """Provide a credentials file with a key and token."""
    path = temp_dir / ".trellokit" / "credentials.json"
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps({"appKey": "file-key", "userToken": "file-token"}))
    return path
