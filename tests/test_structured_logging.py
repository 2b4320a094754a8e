import io
import json

from article_simplifier.common.structured_logging import (
    clear_run_context,
    get_logger,
    route_logs_to,
    set_run_context,
)


def test_get_logger_json_formatting(capsys):
    logger = get_logger("test_logger")
    logger.info("hello world")
    captured = capsys.readouterr()
    output = captured.out.strip()
    data = json.loads(output)
    assert data["event"] == "hello world"
    assert data["level"] == "INFO"
    assert data["logger"] == "test_logger"


def test_run_context_and_extras(capsys):
    logger = get_logger("test_context_logger")
    run_id = set_run_context(run_id="run-1", target_level="beginner")
    try:
        logger.info("rewritten", extra={"chunks": 2})
    finally:
        clear_run_context()
    data = json.loads(capsys.readouterr().out.strip())
    assert run_id == "run-1"
    assert data["run_id"] == "run-1"
    assert data["target_level"] == "beginner"
    assert data["chunks"] == 2


def test_log_performance(capsys):
    logger = get_logger("test_perf_logger")
    with logger.log_performance("unit_op", items=3) as perf:
        pass
    assert perf.duration is not None
    lines = [json.loads(l) for l in capsys.readouterr().out.strip().splitlines()]
    done = lines[-1]
    assert done["event"] == "Completed unit_op"
    assert done["status"] == "success"
    assert done["items"] == 3


def test_route_logs_to_moves_existing_and_new_handlers():
    existing = get_logger("test_route_existing")
    stream = io.StringIO()
    restore = route_logs_to(stream)
    try:
        created_after = get_logger("test_route_created_after")
        existing.info("first")
        created_after.info("second")
    finally:
        restore()
    events = [json.loads(line)["event"] for line in stream.getvalue().splitlines()]
    assert events == ["first", "second"]


def test_restore_puts_handlers_back(capsys):
    logger = get_logger("test_route_restore")
    stream = io.StringIO()
    restore = route_logs_to(stream)
    restore()
    logger.info("back on stdout")
    assert stream.getvalue() == ""
    assert json.loads(capsys.readouterr().out.strip())["event"] == "back on stdout"
