import io
import re

from mettle import counter, indent, log_core, term

_COUNTS = re.compile(r"\[ *(\d+) \| *(\d+) \| *(\d+) \| *(\d+) \]")


def _logger(colored=False):
    buf = io.StringIO()
    term.enable(buf, colored)
    return buf, counter.CounterLogger(indent.IndentingStream(buf))


def _last_counts(text):
    plain = re.sub(r"\033\[[0-9;]*m", "", text)
    frames = _COUNTS.findall(plain)
    return tuple(int(n) for n in frames[-1])


def test_started_run_prints_zero_counter():
    buf, logger = _logger()
    logger.started_run()
    assert buf.getvalue() == "\r[   0 |   0 |   0 |   0 ]"


def test_counts_each_kind():
    buf, logger = _logger()
    logger.started_run()
    logger.passed_test("test", log_core.TestOutput(), 0)
    logger.passed_test("test", log_core.TestOutput(), 0)
    logger.skipped_test("test", "message")
    logger.failed_test("test", "error", log_core.TestOutput(), 0)
    logger.failed_file("test_file", "error")
    assert _last_counts(buf.getvalue()) == (5, 2, 1, 2)
    assert (logger.tests, logger.passes, logger.skips, logger.failures) == \
        (5, 2, 1, 2)


def test_each_result_redraws_line():
    buf, logger = _logger()
    logger.started_run()
    logger.passed_test("test", log_core.TestOutput(), 0)
    logger.skipped_test("test", "message")
    assert buf.getvalue().count("\r") == 3


def test_quiet_events_do_not_redraw():
    buf, logger = _logger()
    logger.started_suite(["suite"])
    logger.started_test("test")
    logger.ended_suite(["suite"])
    logger.started_file("test_file")
    logger.ended_file("test_file")
    assert buf.getvalue() == ""


def test_started_run_resets_counts():
    buf, logger = _logger()
    logger.started_run()
    logger.failed_test("test", "error", log_core.TestOutput(), 0)
    logger.ended_run()
    logger.started_run()
    assert _last_counts(buf.getvalue()) == (0, 0, 0, 0)
    assert buf.getvalue().endswith("]")


def test_ended_run_writes_newline():
    buf, logger = _logger()
    logger.started_run()
    logger.ended_run()
    assert buf.getvalue().endswith(" ]\n")


def test_colored_counter_uses_formats():
    buf, logger = _logger(colored=True)
    logger.started_run()
    text = buf.getvalue()
    reset = term.reset().render(True)
    assert text.count(reset) == 4
    assert term.Format(term.Sgr.BOLD).render(True) in text
    green = term.Format(term.Sgr.BOLD, term.fg(term.Color.GREEN)).render(True)
    assert green in text
    assert _last_counts(text) == (0, 0, 0, 0)