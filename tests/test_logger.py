import json
import threading

from shared.logger import TeaLogger


def test_json_file_logging(tmp_path):
    log_file = tmp_path / "logs" / "tea.log"
    log = TeaLogger(
        "json-test",
        log_level="DEBUG",
        log_file=log_file,
        json_logs=True,
        console_output=False,
    )
    with log.operation("encode"):
        log.debug("Encoding %d characters", 3, length=3)
    log.info("outside")
    for handler in log.underlying.handlers:
        handler.flush()

    lines = log_file.read_text(encoding="utf-8").splitlines()
    first, second = (json.loads(line) for line in lines)
    assert first["message"] == "Encoding 3 characters"
    assert first["level"] == "DEBUG"
    assert first["operation"] == "encode"
    assert first["tool_name"] == "json-test"
    assert first["extra"] == {"length": 3}
    assert "operation" not in second


def test_level_filters_debug(tmp_path):
    log_file = tmp_path / "tea.log"
    log = TeaLogger(
        "level-test", log_level="INFO", log_file=log_file, console_output=False
    )
    log.debug("hidden")
    log.info("shown")
    for handler in log.underlying.handlers:
        handler.flush()
    text = log_file.read_text(encoding="utf-8")
    assert "hidden" not in text
    assert "shown" in text


def test_codec_logs_diagnostics(tmp_path):
    from teacodec.core.engine import TeaCodec

    log_file = tmp_path / "codec.log"
    log = TeaLogger(
        "codec-test",
        log_level="DEBUG",
        log_file=log_file,
        json_logs=True,
        console_output=False,
    )
    codec = TeaCodec(logger=log)
    codec.decode(codec.encode("abc"))
    for handler in log.underlying.handlers:
        handler.flush()

    operations = [
        json.loads(line).get("operation")
        for line in log_file.read_text(encoding="utf-8").splitlines()
    ]
    assert {"configure", "encode", "decode"} <= set(operations)


def test_overlapping_operations_unwind(tmp_path):
    log_file = tmp_path / "overlap.log"
    log = TeaLogger(
        "overlap-test",
        log_level="DEBUG",
        log_file=log_file,
        json_logs=True,
        console_output=False,
    )
    outer = log.operation("outer")
    inner = log.operation("inner")
    outer.__enter__()
    inner.__enter__()
    assert log.current_operation == "inner"
    inner.__exit__(None, None, None)
    assert log.current_operation == "outer"
    outer.__exit__(None, None, None)
    assert log.current_operation is None

    log.info("after")
    for handler in log.underlying.handlers:
        handler.flush()
    (record,) = (
        json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()
    )
    assert "operation" not in record


def test_operation_is_per_thread():
    log = TeaLogger("thread-test", log_level="DEBUG", console_output=False)
    barrier = threading.Barrier(8)
    seen = {}

    def worker(index):
        with log.operation(f"op-{index}"):
            barrier.wait(timeout=5)
            seen[index] = log.current_operation

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(8)]
    with log.operation("main"):
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert log.current_operation == "main"

    assert seen == {i: f"op-{i}" for i in range(8)}
    assert log.current_operation is None


def test_shared_codec_threads_leave_no_operation():
    from teacodec.core.engine import TeaCodec

    log = TeaLogger("codec-threads", log_level="DEBUG", console_output=False)
    codec = TeaCodec(logger=log)
    results = []

    def worker():
        for _ in range(50):
            results.append(codec.decode(codec.encode("abc")))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert results == ["abc"] * 400
    assert log.current_operation is None


def test_reconfigure_logged_at_info(tmp_path):
    from teacodec.core.engine import TeaCodec

    log_file = tmp_path / "reconfigure.log"
    log = TeaLogger(
        "reconfigure-test",
        log_level="INFO",
        log_file=log_file,
        json_logs=True,
        console_output=False,
    )
    codec = TeaCodec(logger=log)
    codec.configure("xyz", 500)
    for handler in log.underlying.handlers:
        handler.flush()

    (record,) = (
        json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()
    )
    assert record["level"] == "INFO"
    assert record["message"] == "Key table replaced: keys 105-182 -> 500-502"
    assert record["operation"] == "configure"
