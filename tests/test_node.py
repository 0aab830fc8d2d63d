import logging

import pytest

from starchain import node


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    starchain_level = logging.getLogger("starchain").level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("starchain").setLevel(starchain_level)


def test_parse_args_defaults():
    args = node.parse_args([])
    assert args.port == 8000
    assert args.host == "127.0.0.1"
    assert args.node_id is None


def test_parse_args_overrides():
    args = node.parse_args(["--host", "0.0.0.0", "--port", "9000", "--log-level", "DEBUG", "--node-id", "n1"])
    assert args.host == "0.0.0.0"
    assert args.port == 9000
    assert args.log_level == "DEBUG"
    assert args.node_id == "n1"


def test_main_serves_ledger(monkeypatch, restore_root_logging):
    calls = {}

    def fake_run(app, host, port, log_level):
        calls.update(app=app, host=host, port=port, log_level=log_level)

    monkeypatch.setattr(node.uvicorn, "run", fake_run)
    node.main(["--port", "9001", "--log-dir", "", "--log-level", "WARNING"])

    assert calls["port"] == 9001
    assert calls["log_level"] == "warning"
    assert calls["app"].state.blockchain.get_height() >= 0
