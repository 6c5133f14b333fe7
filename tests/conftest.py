"""Shared fixtures for the testing of functionality of monotrace."""
from __future__ import annotations

# Standard Imports

# Third-Party Imports
import pytest

# Monotrace Imports
from monotrace.parse import parse
from monotrace.utils import decorators, log
from monotrace.utils.structs import ExceptionResult
import monotrace.testing.utils as test_utils


@pytest.fixture(autouse=True)
def setup(monkeypatch, tmp_path):
    """Cleans the caches and isolates the shared configuration before each test"""
    monkeypatch.setenv("MONOTRACE_CONFIG_DIR", str(tmp_path / "config"))
    # Cleans up the caching of all singleton instances
    decorators.reset_singletons()

    # Reset the verbosity to release
    log.VERBOSITY = log.VERBOSE_RELEASE
    log.COLOR_OUTPUT = True
    log.SUPPRESS_WARNINGS = False
    yield
    decorators.reset_singletons()


@pytest.fixture(scope="session")
def mono_dump() -> str:
    """
    :returns: the dump of the exception with log message, one inner exception, native wrapper
        and dynamic method frames
    """
    return test_utils.load_dump("mono_sample.log")


@pytest.fixture(scope="session")
def mono_result(mono_dump) -> ExceptionResult:
    """
    :returns: the parsed mono dump
    """
    result = parse(mono_dump)
    assert result is not None
    return result


@pytest.fixture(scope="session")
def chained_dump() -> str:
    """
    :returns: the dump of the exception with two nested inner exceptions
    """
    return test_utils.load_dump("chained_exceptions.log")
