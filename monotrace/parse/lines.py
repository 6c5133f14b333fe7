"""Scanning of the line boundaries in the parsed exception dump

The lines are never materialized as a list; instead the scanner returns the spans, i.e. pairs of
``(start, end)`` indices into the original text, with the ``end`` being exclusive and never
including the ``\\n`` delimiter. This allows the backward traversal of arbitrarily large traces
with constant additional memory.
"""
from __future__ import annotations

# Standard Imports
from typing import Iterator, Optional

# Third-Party Imports

# Monotrace Imports

Span = tuple[int, int]
NEWLINE: str = "\n"


def line_span_from(text: str, start: int) -> Optional[Span]:
    """Returns the span of the line starting at the given offset

    The line has to be terminated by the newline; if there is no further newline in the text,
    None is returned, which signals the end of the scanning.

    :param str text: scanned text
    :param int start: offset where the line starts
    :return: span of the line without the delimiter or None
    """
    end = text.find(NEWLINE, start)
    if end == -1:
        return None
    return start, end


def line_span_before(text: str, end: int) -> Optional[Span]:
    """Returns the span of the line ending at the given offset

    If the offset itself lands on the newline, we step one position back first, so the repeated
    calls never process the same delimiter twice. If there is no preceding newline, we have
    reached the first line of the text and None is returned.

    :param str text: scanned text
    :param int end: offset of the last character of the line (or of its delimiter)
    :return: span of the line without the delimiter or None
    """
    if end < 0 or end >= len(text):
        return None
    if text[end] == NEWLINE:
        end -= 1
    start = text.rfind(NEWLINE, 0, end + 1)
    if start == -1:
        return None
    return start + 1, end + 1


def iter_lines_reversed(text: str) -> Iterator[Span]:
    """Iterates the lines of the text from the last one up to the second one

    The first line (i.e. the header of the exception) is never yielded. Blank lines are yielded
    as empty spans.

    :param str text: scanned text
    :return: iterator of the line spans, last line first
    """
    index = len(text) - 1
    while True:
        span = line_span_before(text, index)
        if span is None:
            return
        yield span
        # start of the line minus one lands on the delimiter of the preceding line
        index = span[0] - 1
