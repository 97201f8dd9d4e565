import io

import pytest

from mettle import brief, indent, log_core, term


def _logger(colored=False):
    buf = io.StringIO()
    term.enable(buf, colored)
    out = indent.IndentingStream(buf)
    return buf, brief.BriefLogger(out)


def _colored(color, char):
    start = term.Format(term.Sgr.BOLD, term.fg(color)).render(True)
    return start + char + term.reset().render(True)


def test_quiet_events_write_nothing():
    buf, logger = _logger()
    logger.started_run()
    logger.started_suite(["suite"])
    logger.started_test("test")
    logger.ended_suite(["suite"])
    logger.started_file("test_file")
    logger.ended_file("test_file")
    assert buf.getvalue() == ""


def test_ended_run_writes_newline():
    buf, logger = _logger()
    logger.ended_run()
    assert buf.getvalue() == "\n"


def test_plain_marks():
    buf, logger = _logger()
    logger.passed_test("test", log_core.TestOutput(), 0)
    logger.failed_test("test", "error", log_core.TestOutput(), 0)
    logger.skipped_test("test", "message")
    logger.failed_file("test_file", "error")
    assert buf.getvalue() == ".!_X"


@pytest.mark.parametrize("event, color, char", [
    ("passed", term.Color.GREEN, "."),
    ("failed", term.Color.RED, "!"),
    ("skipped", term.Color.BLUE, "_"),
    ("file", term.Color.RED, "X"),
])
def test_colored_marks(event, color, char):
    buf, logger = _logger(colored=True)
    if event == "passed":
        logger.passed_test("test", log_core.TestOutput(), 0)
    elif event == "failed":
        logger.failed_test("test", "error", log_core.TestOutput(), 0)
    elif event == "skipped":
        logger.skipped_test("test", "message")
    else:
        logger.failed_file("test_file", "error")
    assert buf.getvalue() == _colored(color, char)


def test_failed_mark_is_bold_red():
    buf, logger = _logger(colored=True)
    logger.failed_test("test", "error", log_core.TestOutput(), 0)
    assert buf.getvalue() == "\033[1;31m!\033[0m"


def test_whole_run():
    buf, logger = _logger()
    logger.started_run()
    logger.started_suite(["suite"])
    for _ in range(3):
        logger.started_test("test")
        logger.passed_test("test", log_core.TestOutput(), 0)
    logger.ended_suite(["suite"])
    logger.ended_run()
    assert buf.getvalue() == "...\n"