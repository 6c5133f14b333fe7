"""Set of helper function for logging and printing warnings or errors"""
from __future__ import annotations

# Standard Imports
from typing import Any, Callable, Optional
import logging
import sys
import traceback

# Third-Party Imports
import termcolor

# Monotrace Imports
from monotrace.utils.common.common_kit import AttrChoiceType, ColorChoiceType


VERBOSITY: int = 0
COLOR_OUTPUT: bool = True

# Enum of verbosity levels
VERBOSE_DEBUG: int = 2
VERBOSE_INFO: int = 1
VERBOSE_RELEASE: int = 0

SUPPRESS_WARNINGS: bool = False


def is_verbose_enough(verbosity_peak: int) -> bool:
    """Tests if the current verbosity of the log is enough

    :param int verbosity_peak: peak of the verbosity we are testing
    :return: true if the verbosity is enough
    """
    return VERBOSITY >= verbosity_peak


def _log_msg(
    stream: Callable[[int, str], None], msg: str, msg_verbosity: int, log_level: int
) -> None:
    """
    If the @p msg_verbosity is smaller than the set verbosity of the logging
    module, the @p msg is printed to the log with the given @p log_level

    :param function stream: streaming function of the type void f(log_level, msg)
    :param str msg: message to be logged if certain verbosity is set
    :param int msg_verbosity: level of the verbosity of the message
    :param int log_level: log level of the message
    """
    if msg_verbosity <= VERBOSITY:
        stream(log_level, msg)


def msg_to_file(msg: str, msg_verbosity: int, log_level: int = logging.INFO) -> None:
    """
    Helper function for the log_msg, prints the @p msg to the log,
    if the @p msg_verbosity is smaller or equal to actual verbosity
    """
    _log_msg(logging.log, msg, msg_verbosity, log_level)


def debug(msg: str) -> None:
    """Logs the diagnostic message, which is emitted only with the highest verbosity

    :param str msg: debug message
    """
    msg_to_file(msg, VERBOSE_DEBUG, logging.DEBUG)


def print_current_stack(
    colour: ColorChoiceType = "red", raised_exception: Optional[BaseException] = None
) -> None:
    """Prints the information about stack track leading to an event

    Be default this is used in error traces, so the colour of the printed trace is red.
    Moreover, we filter out the frames outside of monotrace and the frames of the error handlers.

    :param str colour: colour of the printed stack trace
    :param Exception raised_exception: exception that was raised before the error
    """
    reduced_trace = []
    trace = (
        traceback.extract_tb(raised_exception.__traceback__)
        if raised_exception
        else traceback.extract_stack()
    )
    for frame in trace:
        filtering_conditions = [
            "monotrace" not in frame.filename,
            frame.name == "<module>",
            frame.filename.endswith("log.py") and frame.name in ("error", "print_current_stack"),
        ]
        if not any(filtering_conditions):
            reduced_trace.append(frame)
    print(in_color("".join(traceback.format_list(reduced_trace)), colour), file=sys.stderr)


def write(msg: str, end: str = "\n") -> None:
    """
    :param str msg: message that is printed to the standard output
    :param str end: end of the printed message
    """
    print(f"{msg}", end=end)


def error(
    msg: str,
    recoverable: bool = False,
    raised_exception: Optional[BaseException] = None,
) -> None:
    """
    :param str msg: error message printed to standard error output
    :param bool recoverable: whether we can recover from the error
    :param Exception raised_exception: exception that was raised before the error
    """
    print(f"{tag('error', 'red')} {in_color(msg, 'red')}", file=sys.stderr)
    if is_verbose_enough(VERBOSE_DEBUG):
        print_current_stack(raised_exception=raised_exception)

    # If we cannot recover from this error, we end
    if not recoverable:
        sys.exit(1)


def warn(msg: str, end: str = "\n") -> None:
    """
    :param str msg: warn message printed to standard output
    :param str end: end of the printed message
    """
    if not SUPPRESS_WARNINGS:
        print(f"{tag('warning', 'yellow')} {msg}", end=end)


def minor_status(msg: str, status: str = "", sep: str = "-") -> None:
    """Prints minor status containing of two pieces of information: action and its status

    :param msg: printed message, which will be stripped from whitespace and capitalized
    :param status: status of the info
    :param sep: separator used to separate the info with its results
    """
    write(f" - {msg.strip().capitalize()} {sep} {status}")


def tag(tag_str: str, colour: ColorChoiceType) -> str:
    """
    :param tag_str: printed tag
    :param colour: colour of the tag
    :return: formatted tag
    """
    return "[" + in_color(tag_str.upper(), colour, attribute_style=["bold"]) + "]"


def highlight(highlighted_str: str) -> str:
    """Highlights the string

    :param highlighted_str: string that will be highlighted
    :return: highlighted string
    """
    return in_color(highlighted_str, "blue", attribute_style=["bold"])


def in_color(
    output: str, color: ColorChoiceType = "white", attribute_style: Optional[AttrChoiceType] = None
) -> str:
    """Transforms the output to colored version.

    :param str output: the output text that should be colored
    :param str color: the color
    :param str attribute_style: name of the additional style, i.e. bold, italic, etc.

    :return str: the new colored output (if enabled)
    """
    if COLOR_OUTPUT:
        return termcolor.colored(output, color, attrs=attribute_style, force_color=True)
    else:
        return output


def configure_logging(verbosity: int, **kwargs: Any) -> None:
    """Sets the verbosity of the log and configures the underlying logging module accordingly

    :param int verbosity: requested verbosity, the verbosity is never lowered
    :param dict kwargs: additional parameters passed to ``logging.basicConfig``
    """
    global VERBOSITY
    if VERBOSITY < verbosity:
        VERBOSITY = verbosity
    level = logging.DEBUG if is_verbose_enough(VERBOSE_DEBUG) else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", **kwargs)
    logging.getLogger().setLevel(level)
