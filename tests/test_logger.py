import json

from common.utils.logger import configure_logging, get_logger
from simplememorystore.core import Store


def test_configured_level_silences_store_debug_events(capsys):
    configure_logging("simplememorystore", level="WARNING")
    Store().insert("tweets", {"message": "quiet"})

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_configured_logging_writes_json_to_stderr(capsys):
    configure_logging("simplememorystore", level="debug")
    Store().insert("tweets", {"message": "loud"})

    captured = capsys.readouterr()
    assert captured.out == ""
    (event,) = [json.loads(line) for line in captured.err.splitlines() if line]
    assert event["event"] == "record_inserted"
    assert event["component"] == "store"
    assert event["service"] == "simplememorystore"


def test_get_logger_attaches_initial_values(capsys):
    configure_logging("svc", level="info")
    get_logger("svc", component="unit").info("hello", answer=42)

    event = json.loads(capsys.readouterr().err.strip())
    assert event == {
        "service": "svc",
        "component": "unit",
        "answer": 42,
        "event": "hello",
        "level": "info",
        "timestamp": event["timestamp"],
    }
