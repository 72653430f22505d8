import json
import logging
import pytest

from product_search.app.platform.logging import JsonFormatter, RequestIDFilter, request_id_ctx, setup_logging


def _record(msg="hello %s", args=("world",), **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="product_search.test", level=logging.INFO, pathname=__file__,
        lineno=1, msg=msg, args=args, exc_info=None,
    )
    for k, v in extra.items():
        setattr(record, k, v)
    return record


def test_request_id_filter_injects_context_value():
    """
    컨텍스트 변수의 request id가 로그 레코드에 실리는지 검증
    """
    token = request_id_ctx.set("req-1")
    try:
        record = _record()
        assert RequestIDFilter().filter(record) is True
        assert record.request_id == "req-1"
    finally:
        request_id_ctx.reset(token)


def test_json_formatter_basic_fields():
    """
    JSON 라인에 기본 필드가 포함되는지 검증
    """
    record = _record(request_id="abc")
    payload = json.loads(JsonFormatter().format(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "product_search.test"
    assert payload["message"] == "hello world"
    assert payload["request_id"] == "abc"
    assert payload["timestamp"].endswith("Z")
    assert "exc_info" not in payload


def test_json_formatter_includes_access_fields_only_when_present():
    """
    access 로그 필드는 있을 때만 포함
    """
    record = _record(http_method="POST", path="/api/products/search", duration_ms=1.5)
    payload = json.loads(JsonFormatter().format(record))

    assert payload["http_method"] == "POST"
    assert payload["path"] == "/api/products/search"
    assert payload["duration_ms"] == 1.5
    assert "status_code" not in payload
    # request_id 필터가 안 붙은 레코드
    assert payload["request_id"] == "-"


@pytest.fixture
def restore_logging():
    names = ("", "uvicorn.error", "uvicorn.access")
    saved = {n: (logging.getLogger(n).level, logging.getLogger(n).propagate) for n in names}
    yield
    for n in names:
        logger = logging.getLogger(n)
        # setup_logging 이 붙인 핸들러만 제거
        for h in [h for h in logger.handlers if any(isinstance(f, RequestIDFilter) for f in h.filters)]:
            logger.removeHandler(h)
            h.close()
        logger.setLevel(saved[n][0])
        logger.propagate = saved[n][1]


def test_setup_logging_writes_json_lines_to_files(tmp_path, restore_logging):
    """
    파일 로깅을 켜면 app.log / access.log 에 JSON 라인이 남는지 검증
    """
    setup_logging(log_to_file=True, log_dir=str(tmp_path / "logs"), as_json=True, level="INFO")

    token = request_id_ctx.set("rid-9")
    try:
        logging.getLogger("product_search.test").info("search done")
        logging.getLogger("uvicorn.access").info("POST /api/products/search", extra={"status_code": 200})
    finally:
        request_id_ctx.reset(token)
    for h in logging.getLogger().handlers + logging.getLogger("uvicorn.access").handlers:
        h.flush()

    app_line = json.loads((tmp_path / "logs" / "app.log").read_text(encoding="utf-8").splitlines()[-1])
    access_line = json.loads((tmp_path / "logs" / "access.log").read_text(encoding="utf-8").splitlines()[-1])

    assert app_line["message"] == "search done"
    assert app_line["request_id"] == "rid-9"
    assert access_line["status_code"] == 200
    assert logging.getLogger("uvicorn.access").propagate is False


def test_setup_logging_text_mode_uses_text_formatter(restore_logging):
    setup_logging(as_json=False, level="DEBUG")

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert not isinstance(root.handlers[0].formatter, JsonFormatter)
    assert "%(request_id)s" in root.handlers[0].formatter._fmt
