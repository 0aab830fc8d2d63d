import logging

import pytest

from starchain.config.logging_config import get_component_logger, get_logger, setup_logging


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    starchain_level = logging.getLogger("starchain").level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("starchain").setLevel(starchain_level)


def test_setup_logging_creates_files(tmp_path, restore_root_logging):
    setup_logging(log_dir=str(tmp_path / "logs"), log_level="DEBUG", node_id="node1")

    files = sorted(p.name for p in (tmp_path / "logs").iterdir())
    assert any(name.endswith("_node1.log") for name in files)
    assert any(name.endswith("_node1_error.log") for name in files)
    assert logging.getLogger().level == logging.DEBUG


def test_setup_logging_console_only(tmp_path, restore_root_logging):
    setup_logging(log_dir=None, log_level=logging.WARNING)
    assert logging.getLogger().level == logging.WARNING
    assert all(not isinstance(h, logging.FileHandler) for h in logging.getLogger().handlers)


def test_setup_logging_rejects_unknown_level(restore_root_logging):
    with pytest.raises(ValueError):
        setup_logging(log_dir=None, log_level="LOUD")


def test_get_logger_namespace():
    assert get_logger("api").name == "starchain.api"


def test_component_logger_adds_context():
    adapter = get_component_logger("node", node_id="n1")
    msg, _ = adapter.process("started", {})
    assert msg == "[node_id=n1] [component=node] started"
