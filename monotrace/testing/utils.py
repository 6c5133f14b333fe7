"""Helper functions for loading the testing exception dumps"""
from __future__ import annotations

# Standard Imports
from typing import TextIO
import os

# Third-Party Imports

# Monotrace Imports
from monotrace.utils import streams


def load_dumpname(dump_filename: str) -> str:
    """Helper function for getting the path of the exception dump stored in the test pool

    :param str dump_filename: name of the dump
    :return: full path to the dump
    """
    pool_path = os.path.join(os.path.split(__file__)[0], "..", "..", "tests", "dumps")
    return os.path.join(pool_path, dump_filename)


def open_dump(dump_filename: str) -> TextIO:
    """Opens the dump from the test pool without the translation of the line endings

    :param str dump_filename: name of the dump
    :return: opened stream of the dump
    """
    return open(load_dumpname(dump_filename), "r", newline="")


def load_dump(dump_filename: str, normalize_newlines: bool = False) -> str:
    """Helper function for loading the raw exception dump from the test pool

    :param str dump_filename: name of the dump
    :param bool normalize_newlines: if set to true, the windows line endings are normalized
    :return: content of the dump
    """
    with open_dump(dump_filename) as dump_handle:
        return streams.read_dump(dump_handle, normalize_newlines=normalize_newlines)
