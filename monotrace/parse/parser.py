"""Parsing of the whole exception dump into the tree of exceptions and their stacktraces"""
from __future__ import annotations

# Standard Imports
from typing import Optional
import dataclasses

# Third-Party Imports

# Monotrace Imports
from monotrace.parse import frame, header, lines
from monotrace.utils import log
from monotrace.utils.exceptions import MalformedExceptionTextException
from monotrace.utils.structs import ExceptionMethod, ExceptionResult

EXCEPTION_PROBE: str = "Exception"
INNER_STACKTRACE_END: str = "--- End of inner exception stack trace ---"


def is_inner_stacktrace_end(line: str) -> bool:
    """
    :param str line: line of the stacktrace
    :return: true if the line is the boundary between the inner and outer exception frames
    """
    return line.strip().startswith(INNER_STACKTRACE_END)


def _commit_stacktraces(
    chain: list[ExceptionResult], stacktraces: list[tuple[ExceptionMethod, ...]]
) -> ExceptionResult:
    """Rebuilds the chain of the exceptions with the collected stacktraces

    :param list chain: nodes of the chain, from the outermost to the innermost
    :param list stacktraces: stacktraces of the corresponding nodes
    :return: the new root of the chain
    """
    root = dataclasses.replace(chain[-1], stacktrace=stacktraces[-1])
    for node, stacktrace in zip(reversed(chain[:-1]), reversed(stacktraces[:-1])):
        root = dataclasses.replace(node, inner_exception=root, stacktrace=stacktrace)
    return root


def parse(text: str) -> Optional[ExceptionResult]:
    """Parses a stringified exception received from a Unity engine game (or other Mono
    application) into the tree containing the parsed exceptions and associated stacktraces.

    The parsing is done in two passes. First, the header (i.e. the first line) is parsed from left
    to right into the chain of the exception and its inner exceptions. Then the rest of the text
    is walked backward, line by line, starting from the bottom of the trace, i.e. from the frames
    of the outermost exception. Each line is either a frame, which is collected for the current
    exception, or the ``--- End of inner exception stack trace ---`` marker, which ends the frames
    of the current exception and moves to its inner exception.

    :param str text: the stringified exception, with lines delimited by ``\\n``
    :return: root of the parsed exception chain, or None if the header of the exception is empty
    :raises MalformedExceptionTextException: if the text is not an exception with a stacktrace
    """
    if not isinstance(text, str):
        raise TypeError(f"expected the exception text as str, got '{type(text).__name__}'")
    if EXCEPTION_PROBE not in text:
        raise MalformedExceptionTextException("an exception with a stacktrace was not passed")

    header_span = lines.line_span_from(text, 0)
    if header_span is None or header_span[0] == header_span[1]:
        log.debug("nothing to parse: the header of the exception is empty")
        return None
    root = header.parse_outer_header(text[slice(*header_span)])
    if root is None:
        return None

    chain = list(root.chain())
    stacktraces: list[tuple[ExceptionMethod, ...]] = [() for _ in chain]
    current = 0
    frames: list[ExceptionMethod] = []
    for span in lines.iter_lines_reversed(text):
        if current >= len(chain):
            break
        line = text[slice(*span)]
        if is_inner_stacktrace_end(line):
            log.debug(f"end of the stacktrace of '{chain[current].type}'")
            stacktraces[current] = tuple(frames)
            current += 1
            frames = []
            continue
        method = frame.parse_frame(line)
        if method is None:
            if line.strip():
                log.debug(f"skipping unrecognized line '{line.strip()}'")
            continue
        frames.append(method)

    if frames and current < len(chain):
        stacktraces[current] = tuple(frames)

    return _commit_stacktraces(chain, stacktraces)
