"""Parsing of the header of the exception

The header is the first line of the exception dump and contains the optional log message, the
type of the exception and its message, followed by the (possibly empty) chain of the headers of
the inner exceptions, separated by the ``--->`` marker::

    Log message: System.TypeInitializationException: The type initializer ... ---> System.NullReferenceException: Object reference ...
"""
from __future__ import annotations

# Standard Imports
import re
from typing import Optional

# Third-Party Imports

# Monotrace Imports
from monotrace.utils import log
from monotrace.utils.exceptions import MalformedExceptionTextException
from monotrace.utils.structs import ExceptionResult, HeaderMode, HeaderParsePosition

INNER_EXCEPTION_MARKER: str = "--->"
FIELD_DELIMITER: str = ":"
TYPE_NAME_RE: re.Pattern[str] = re.compile(r"^[\w.+`]+$")


def _next_delimiter(chunk: str, start: int) -> int:
    """Finds the next field delimiter, i.e. the colon that is not part of the ``::`` token

    :param str chunk: scanned part of the header
    :param int start: index where the scanning starts
    :return: index of the next delimiter or -1 if there is none
    """
    index = start
    while index < len(chunk):
        if chunk[index] == FIELD_DELIMITER:
            if index + 1 < len(chunk) and chunk[index + 1] == FIELD_DELIMITER:
                index += 2
                continue
            return index
        index += 1
    return -1


def looks_like_type_name(field: str) -> bool:
    """Checks whether the field looks like the name of the exception type

    The type is a single token of word characters, dots, pluses (nested types) and backticks
    (generic arity), which is either qualified by the namespace or ends with ``Exception``.

    :param str field: stripped field of the header
    :return: true if the field can be the type of the exception
    """
    return TYPE_NAME_RE.match(field) is not None and (
        "." in field or field.endswith("Exception")
    )


def _starts_with_log_message(chunk: str, field: str, start: int) -> bool:
    """Checks whether the first field of the header is the log message

    The first field is the log message only if it does not look like a type itself, while the
    field following it (terminated by the delimiter) does.

    :param str chunk: scanned part of the header
    :param str field: the stripped first field
    :param int start: index of the start of the following field
    :return: true if the first field is the log message
    """
    end = _next_delimiter(chunk, start)
    if end == -1 or looks_like_type_name(field):
        return False
    return looks_like_type_name(chunk[start:end].strip())


def parse_header(segment: str, mode: HeaderMode) -> Optional[ExceptionResult]:
    """Parses the header of the exception segment, including the chain of its inner exceptions

    The header is scanned from left to right, with state being one of ``NONE``,
    ``EXCEPTION_TYPE`` and ``EXCEPTION_MESSAGE``. In ``NONE`` the first delimiter either ends the
    log message (if the log message is allowed and the type follows) or the type of the exception.
    Once the type is found, the rest of the segment is the message.

    :param str segment: header of the exception segment
    :param HeaderMode mode: whether the leading log message can be present
    :return: parsed exception with empty stacktrace, or None if the segment is empty
    :raises MalformedExceptionTextException: if the type of the exception cannot be found
    """
    if not segment.strip():
        return None

    inner_exception = None
    inner_index = segment.find(INNER_EXCEPTION_MARKER)
    chunk = segment if inner_index == -1 else segment[:inner_index]
    if inner_index != -1:
        inner_segment = segment[inner_index + len(INNER_EXCEPTION_MARKER) :]
        inner_exception = parse_inner_header(inner_segment)
        if inner_exception is None:
            raise MalformedExceptionTextException("missing inner exception header", segment)

    log_message, exception_type = None, None
    state = HeaderParsePosition.NONE
    boundary_start = 0
    while state != HeaderParsePosition.EXCEPTION_MESSAGE:
        delimiter = _next_delimiter(chunk, boundary_start)
        if delimiter == -1:
            raise MalformedExceptionTextException("missing exception type delimiter", chunk)
        field = chunk[boundary_start:delimiter].strip()
        if (
            state == HeaderParsePosition.NONE
            and mode == HeaderMode.ALLOW_LOG_MESSAGE
            and _starts_with_log_message(chunk, field, delimiter + 1)
        ):
            log_message = field
            state = HeaderParsePosition.EXCEPTION_TYPE
        else:
            exception_type = field
            state = HeaderParsePosition.EXCEPTION_MESSAGE
        boundary_start = delimiter + 1

    if not exception_type:
        raise MalformedExceptionTextException("empty exception type", chunk)
    log.debug(f"parsed header of '{exception_type}'")
    return ExceptionResult(
        type=exception_type,
        message=chunk[boundary_start:].strip(),
        log_message=log_message,
        inner_exception=inner_exception,
    )


def parse_outer_header(header: str) -> Optional[ExceptionResult]:
    """Parses the header of the outermost exception, which may be prefixed by the log message

    :param str header: the first line of the exception dump
    :return: parsed chain of exceptions or None if the header is empty
    """
    return parse_header(header, HeaderMode.ALLOW_LOG_MESSAGE)


def parse_inner_header(header: str) -> Optional[ExceptionResult]:
    """Parses the header of the inner exception, i.e. the part following the ``--->`` marker

    :param str header: header of the inner exception
    :return: parsed chain of inner exceptions or None if the header is empty
    """
    return parse_header(header, HeaderMode.SUPPRESS_LOG_MESSAGE)
