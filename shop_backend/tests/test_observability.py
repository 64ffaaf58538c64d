import json
import logging

from src.core.observability import JsonFormatter, log_event, set_request_id


def test_json_formatter_includes_request_context():
    set_request_id("req-1")
    record = logging.LogRecord("shop", logging.INFO, __file__, 1, "order_placed", None, None)
    record.order_id = 3

    payload = json.loads(JsonFormatter().format(record))

    assert payload["message"] == "order_placed"
    assert payload["request_id"] == "req-1"
    assert payload["order_id"] == 3
    assert payload["member_id"] is None
    set_request_id(None)


def test_log_event_attaches_ids(caplog):
    with caplog.at_level(logging.INFO, logger="shop"):
        log_event("member_joined", member_id=5)

    record = next(record for record in caplog.records if record.getMessage() == "member_joined")
    assert record.member_id == 5
    assert record.order_id is None
