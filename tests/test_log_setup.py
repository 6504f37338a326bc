# tests/test_log_setup.py
import io
import json
import logging

from dispatchdemo.core import log


def test_json_handler_writes_one_object_per_record():
    h = log.JsonHandler()
    buf = io.StringIO()
    h.setStream(buf)
    rec = logging.LogRecord("dispatchdemo.test", logging.INFO, __file__, 7, "hello %s", ("json",), None)
    h.handle(rec)

    obj = json.loads(buf.getvalue().strip())
    assert obj["lvl"] == "INFO"
    assert obj["name"] == "dispatchdemo.test"
    assert obj["msg"] == "hello json"
    assert obj["lineno"] == 7


def test_setup_is_idempotent_without_force():
    log.setup("DEBUG", force=True)
    try:
        log.setup("ERROR")
        assert logging.getLogger().level == logging.DEBUG
    finally:
        log.setup(force=True)


def test_setup_uses_env_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "error")
    try:
        log.setup(force=True)
        assert logging.getLogger().level == logging.ERROR
        assert len(logging.getLogger().handlers) == 1
    finally:
        monkeypatch.delenv("LOG_LEVEL")
        log.setup(force=True)


def test_set_level_falls_back_on_unknown_name():
    try:
        log.set_level("nonsense")
        assert logging.getLogger().level == logging.WARNING
        log.set_level("info")
        assert logging.getLogger().level == logging.INFO
    finally:
        log.setup(force=True)
