"""Matchers, value printing, terminal formatting, indented output, filters, loggers and option parsing for tests."""

__version__ = "0.1.0"