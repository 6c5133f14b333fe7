"""Functions for loading and working with streams (e.g. yaml, json or the parsed dumps)

Some of the stuff is stored in the stream, like e.g. yaml, and is reused in several places.
This module encapsulates such functions, so they can be used in CLI, in tests, in configs.
"""
from __future__ import annotations

# Standard Imports
from typing import TextIO, Any
import io
import json
import os

# Third-Party Imports
from ruamel.yaml import YAML

# Monotrace Imports
from monotrace.utils import log


def safely_load_yaml_from_file(yaml_file: str) -> dict[Any, Any]:
    """
    :param str yaml_file: name of the yaml file
    :return: loaded dictionary or empty dictionary if the file does not exist
    """
    if not os.path.exists(yaml_file):
        log.warn(f"yaml source file '{yaml_file}' does not exist")
        return {}

    with open(yaml_file, "r") as yaml_handle:
        return safely_load_yaml_from_stream(yaml_handle)


def safely_load_yaml_from_stream(yaml_stream: TextIO | str) -> dict[Any, Any]:
    """
    :param str yaml_stream: stream in the yaml format (or not)
    :return: loaded dictionary or empty dictionary if the stream is malformed
    """
    try:
        loaded_yaml = YAML().load(yaml_stream)
        return loaded_yaml or {}
    except Exception as exc:
        log.warn(f"malformed yaml stream: {exc}")
        return {}


def yaml_to_string(dictionary: dict[Any, Any]) -> str:
    """Converts the dictionary representing the YAML into string

    :param dict dictionary: yaml stored as dictionary
    :return: string representation of the yaml
    """
    string_stream = io.StringIO()
    yaml_dumper = YAML()
    yaml_dumper.default_flow_style = False
    yaml_dumper.dump(dictionary, string_stream)
    return string_stream.getvalue()


def json_to_string(dictionary: dict[Any, Any]) -> str:
    """Converts the dictionary into indented json string

    :param dict dictionary: dictionary that will be dumped
    :return: string representation of the json
    """
    return json.dumps(dictionary, indent=2)


def read_dump(source: TextIO, normalize_newlines: bool = True) -> str:
    """Reads the whole textual exception dump from the stream

    The parser itself splits the lines only by ``\\n``, hence the windows line endings are by
    default normalized right after reading.

    :param TextIO source: opened stream (file or standard input)
    :param bool normalize_newlines: if set to true, ``\\r\\n`` are replaced by ``\\n``
    :return: the read dump
    """
    content = source.read()
    if normalize_newlines:
        content = content.replace("\r\n", "\n")
    return content


def load_yaml_scalar(value: str) -> Any:
    """Loads the single value given e.g. on the command line as yaml scalar

    I.e. ``true`` is loaded as boolean, ``8`` as integer and the rest is kept as string.

    :param str value: loaded value
    :return: value converted to the corresponding python type
    """
    try:
        loaded = YAML(typ="safe").load(value)
    except Exception as exc:
        log.warn(f"could not load '{value}' as yaml scalar: {exc}")
        return value
    return value if loaded is None or isinstance(loaded, (dict, list)) else loaded
