"""Set of helper constants and helper functions for monotrace"""
from __future__ import annotations

# Standard Imports
from typing import Optional, Iterable, Literal
import os
import re

# Third-Party Imports

# Monotrace Imports

# Types
ColorChoiceType = Literal[
    "black",
    "grey",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "light_grey",
    "dark_grey",
    "light_red",
    "light_green",
    "light_yellow",
    "light_blue",
    "light_magenta",
    "light_cyan",
    "white",
]
AttrChoiceType = Iterable[Literal["bold", "dark", "underline", "blink", "reverse", "concealed"]]

# Exception tree specific
EXCEPTION_TYPE_COLOUR: ColorChoiceType = "red"
LOG_MESSAGE_COLOUR: ColorChoiceType = "cyan"
FRAME_TYPE_COLOUR: ColorChoiceType = "blue"
FRAME_METHOD_COLOUR: ColorChoiceType = "green"
IL_OFFSET_COLOUR: ColorChoiceType = "light_grey"
WRAPPER_COLOUR: ColorChoiceType = "magenta"
FRAME_ATTRS: Optional[AttrChoiceType] = None
HEADER_ATTRS: AttrChoiceType = ["bold"]

ANSI_ESCAPE: re.Pattern[str] = re.compile(r"(?:\x1B[@-_]|[\x80-\x9F])[0-?]*[ -/]*[@-~]")


def escape_ansi(line: str) -> str:
    """Escapes the font/colour ansi characters in the line

    Based on: https://stackoverflow.com/a/38662876

    :param str line: line with ansi control characters
    :return: ansi control-free string
    """
    return ANSI_ESCAPE.sub("", line)


def touch_file(touched_filename: str, times: Optional[tuple[int, int]] = None) -> None:
    """
    Corresponding implementation of touch inside python.
    Courtesy of:
    https://stackoverflow.com/questions/1158076/implement-touch-using-python

    :param str touched_filename: filename that will be touched
    :param time times: access times of the file
    """
    with open(touched_filename, "a"):
        os.utime(touched_filename, times)


def touch_dir(touched_dir: str) -> None:
    """
    Touches directory, i.e. if it exists it does nothing and
    if the directory does not exist, then it creates it.

    :param str touched_dir: path that will be touched
    """
    if not os.path.exists(touched_dir):
        os.makedirs(touched_dir)


def str_to_plural(count: int, verb: str) -> str:
    """Helper function that returns the plural of the string if count is more than 1

    :param int count: number of the verbs
    :param str verb: name of the verb we are creating a plural for
    """
    return str(count) + " " + (verb + "s" if count != 1 else verb)
