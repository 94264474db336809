import json
import logging

from loigen.adapters.logging_utils import JsonLogFormatter, get_logger


def _record(msg, **attrs):
    rec = logging.LogRecord("loigen.test", logging.INFO, __file__, 1, msg, None, None)
    for k, v in attrs.items():
        setattr(rec, k, v)
    return rec


def test_formatter_tags_service_and_merges_context():
    line = JsonLogFormatter().format(_record("listings_processed", context={"rows": 3}))

    payload = json.loads(line)
    assert payload["service"] == "loigen"
    assert payload["message"] == "listings_processed"
    assert payload["rows"] == 3
    assert "env" in payload


def test_formatter_stringifies_non_json_values(tmp_path):
    payload = json.loads(JsonLogFormatter().format(_record("x", context={"path": tmp_path})))

    assert payload["path"] == str(tmp_path)


def test_get_logger_attaches_a_single_handler():
    a = get_logger("loigen.test.single")
    b = get_logger("loigen.test.single")

    assert a is b
    assert len(a.handlers) == 1
    assert a.propagate is False
