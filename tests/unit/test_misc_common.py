import json
import logging
from pathlib import Path

from greenspace.common.ids import generate_run_id
from greenspace.common.logging import JsonLineFormatter, build_logger, log_event
from greenspace.pipeline.numbers import format_number, safe_float, safe_int


def test_generate_run_id_prefix():
    assert generate_run_id().startswith("load-")


def test_safe_float_rejects_blank_text_and_non_finite_values():
    assert safe_float(" 12.5 ") == 12.5
    assert safe_float("") is None
    assert safe_float("abc") is None
    assert safe_float("nan") is None
    assert safe_float("-inf") is None
    assert safe_float(True) is None


def test_safe_int_accepts_integral_floats_only():
    assert safe_int("12") == 12
    assert safe_int("12.0") == 12
    assert safe_int("12.5") is None


def test_format_number_drops_trailing_zero():
    assert format_number(162.0) == "162"
    assert format_number(1.2) == "1.2"
    assert format_number(0) == "0"


def test_json_line_formatter_emits_stable_schema():
    record = logging.LogRecord("greenspace", logging.INFO, __file__, 1, "load end", None, None)
    record.event = "LOAD_END"
    record.rows_out = 6

    payload = json.loads(JsonLineFormatter().format(record))

    assert payload["event"] == "LOAD_END"
    assert payload["rows_out"] == 6
    assert payload["message"] == "load end"
    assert payload["error_code"] is None


def test_build_logger_writes_jsonl_file(tmp_path: Path):
    logger = build_logger("load-test", log_dir=tmp_path)
    log_event(logger, "load start", run_id="load-test", event="LOAD_START", status="ok")
    for handler in logger.handlers:
        handler.flush()

    lines = (tmp_path / "load-test.log.jsonl").read_text(encoding="utf-8").splitlines()
    assert json.loads(lines[0])["event"] == "LOAD_START"
