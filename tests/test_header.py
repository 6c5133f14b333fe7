"""Tests for parsing the header of the exception, i.e. the log message, the type of the exception,
its message and the chain of inner exceptions.
"""
from __future__ import annotations

# Standard Imports

# Third-Party Imports
import pytest

# Monotrace Imports
from monotrace.parse import header
from monotrace.utils.exceptions import MalformedExceptionTextException
from monotrace.utils.structs import HeaderMode


def test_header_without_log_message():
    """Test parsing the header consisting of the type and the message only"""
    result = header.parse_outer_header("System.NullReferenceException: Object reference not set")
    assert result.log_message is None
    assert result.type == "System.NullReferenceException"
    assert result.message == "Object reference not set"
    assert result.inner_exception is None
    assert result.stacktrace == ()


def test_header_with_log_message():
    """Test parsing the header prefixed by the log message

    Expecting that the rest of the header following the type is kept as message, including the
    further delimiters.
    """
    result = header.parse_outer_header(
        "Could not load the settings: System.IO.IOException: Sharing violation: settings.xml"
    )
    assert result.log_message == "Could not load the settings"
    assert result.type == "System.IO.IOException"
    assert result.message == "Sharing violation: settings.xml"

    result = header.parse_outer_header("Unhandled: System.Exception:")
    assert result.log_message == "Unhandled"
    assert result.type == "System.Exception"
    assert result.message == ""


def test_header_suppressed_log_message():
    """Test that the inner headers never contain the log message"""
    result = header.parse_inner_header("Log: System.Exception: message")
    assert result.log_message is None
    assert result.type == "Log"
    assert result.message == "System.Exception: message"

    result = header.parse_header("System.Exception: boom", HeaderMode.SUPPRESS_LOG_MESSAGE)
    assert result.type == "System.Exception"
    assert result.message == "boom"


def test_header_double_colon():
    """Test that the ``::`` token is never considered to be the delimiter"""
    result = header.parse_outer_header("Error in Game::Update: System.Exception: boom")
    assert result.log_message == "Error in Game::Update"
    assert result.type == "System.Exception"
    assert result.message == "boom"

    result = header.parse_outer_header("System.Exception: failed in Game::Update")
    assert result.log_message is None
    assert result.message == "failed in Game::Update"


def test_header_chain():
    """Test parsing the header with several inner exceptions"""
    result = header.parse_outer_header(
        "Log: Game.OuterException: outer ---> Game.MiddleException: middle"
        " ---> Game.RootException: root cause"
    )
    assert result.depth == 3
    assert [node.type for node in result.chain()] == [
        "Game.OuterException",
        "Game.MiddleException",
        "Game.RootException",
    ]
    assert [node.message for node in result.chain()] == ["outer", "middle", "root cause"]
    assert [node.log_message for node in result.chain()] == ["Log", None, None]
    assert result.innermost.type == "Game.RootException"


@pytest.mark.parametrize(
    "segment",
    [
        "System.Exception without any delimiter",
        "Game.OuterException: outer --->    ",
        "Game.OuterException: outer ---> no delimiter in the inner one",
        ": message without type",
    ],
)
def test_header_malformed(segment):
    """Test parsing the headers, where the type of the exception cannot be found"""
    with pytest.raises(MalformedExceptionTextException) as exc:
        header.parse_outer_header(segment)
    assert "malformed exception text" in str(exc.value)


def test_header_empty():
    """Test that the empty headers are not parsed"""
    assert header.parse_outer_header("") is None
    assert header.parse_outer_header("   ") is None
    assert header.parse_inner_header("") is None


def test_header_message_with_delimiter():
    """Test that the delimiter in the message does not turn the type into the log message"""
    result = header.parse_outer_header("System.InvalidOperationException: Error: bad state")
    assert result.log_message is None
    assert result.type == "System.InvalidOperationException"
    assert result.message == "Error: bad state"

    result = header.parse_outer_header("Log: System.Exception: Error: bad state")
    assert result.log_message == "Log"
    assert result.type == "System.Exception"
    assert result.message == "Error: bad state"

    assert header.looks_like_type_name("System.IO.IOException")
    assert header.looks_like_type_name("Game.Outer+NestedError")
    assert header.looks_like_type_name("CustomException")
    assert not header.looks_like_type_name("Error")
    assert not header.looks_like_type_name("bad state")
    assert not header.looks_like_type_name("")
