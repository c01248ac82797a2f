"""JSON log formatter - structured fields and exception capture."""

import json
import logging

from campus.infrastructure.observability import JSONFormatter, setup_logging


def _record(msg="hello", **extra):
    record = logging.LogRecord(
        name="campus.test", level=logging.INFO, pathname=__file__, lineno=1,
        msg=msg, args=(), exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formats_json_with_extra_fields():
    line = JSONFormatter().format(_record(operation="create_learner", entity_id="3"))
    payload = json.loads(line)
    assert payload["message"] == "hello"
    assert payload["level"] == "INFO"
    assert payload["operation"] == "create_learner"
    assert payload["entity_id"] == "3"


def test_absent_extra_fields_are_omitted():
    payload = json.loads(JSONFormatter().format(_record()))
    assert "operation" not in payload


def test_setup_logging_does_not_stack_handlers():
    root = logging.getLogger()
    before = len(root.handlers)
    setup_logging("DEBUG", "text")
    setup_logging("INFO", "json")
    campus_handlers = [h for h in root.handlers if h.get_name() == "campus"]
    assert len(campus_handlers) == 1
    assert isinstance(campus_handlers[0].formatter, JSONFormatter)
    assert len(root.handlers) <= before + 1
    root.removeHandler(campus_handlers[0])
