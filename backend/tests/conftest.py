import os
import sys
from pathlib import Path

import pytest

# Ensure the backend root (containing the `tictactoe` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from fastapi.testclient import TestClient

from tictactoe.main import create_app
from tictactoe.protocol import MessageProtocol
from tictactoe.registry import GameRegistry


class TestConfig:
    debug = True
    allowed_origins = ["*"]
    log_level = "DEBUG"
    websocket_path = "/websocket"
    frontend_dir = Path(CURRENT_DIR) / "no-frontend"
    trust_client_marker = False
    evict_abandoned = True
    notify_errors = False
    host = "127.0.0.1"
    port = 8080


class FakeChannel:
    def __init__(self, name):
        self.name = name

    def __repr__(self):
        return f"FakeChannel({self.name})"


@pytest.fixture()
def registry():
    return GameRegistry()


@pytest.fixture()
def protocol(registry):
    return MessageProtocol(registry)


@pytest.fixture()
def channels():
    return FakeChannel("a"), FakeChannel("b")


@pytest.fixture()
def application():
    return create_app(TestConfig)


@pytest.fixture()
def client(application):
    with TestClient(application) as c:
        yield c
