"""Parsing of the single stack frame line of the Mono stacktrace

The frames are in the following form (the parts in brackets are optional)::

      [at ][(wrapper managed-to-native)|(wrapper dynamic-method)] <Type>.<Method>[<Generic,...>] (<Param,...>) [<ILOffset>] in <token>:<line>

The frame is parsed from its end to the beginning. The suffix of the frame (IL offset, parameter
list and generic parameters) is delimited by brackets and is thus unambiguous, when read from
right to left, while the qualified name of the type and method is ambiguous until the boundary of
the method name is found. The trailing location annotation (``in <token>:<line>``) is always
discarded.
"""
from __future__ import annotations

# Standard Imports
from typing import Optional

# Third-Party Imports

# Monotrace Imports
from monotrace.parse import signature
from monotrace.utils.structs import ExceptionMethod

FRAME_MARKER: str = "at "
WRAPPER_PREFIX: str = "(wrapper "
NATIVE_WRAPPER: str = "(wrapper managed-to-native)"
DYNAMIC_METHOD: str = "(wrapper dynamic-method)"
LOCATION_SEPARATOR: str = " in "


def strip_wrapper(call_site: str) -> tuple[str, Optional[str]]:
    """Strips the ``(wrapper <kind>)`` prefix of the call site

    :param str call_site: the frame without the leading ``at`` marker
    :return: pair of the call site without the prefix and the stripped prefix (or None)
    """
    if not call_site.startswith(WRAPPER_PREFIX):
        return call_site, None
    end = call_site.find(")")
    if end == -1:
        return call_site, None
    return call_site[end + 1 :].lstrip(), call_site[: end + 1]


def strip_location(call_site: str) -> str:
    """Strips the trailing location annotation ``in <token>:<line>``

    Only the separator that directly follows the IL offset or the parameter list is considered,
    hence the ``in`` that is part of the (e.g. file) token itself is skipped.

    :param str call_site: the frame without the leading ``at`` marker
    :return: the frame without the location annotation
    """
    separator = call_site.rfind(LOCATION_SEPARATOR)
    while separator != -1:
        prefix = call_site[:separator].rstrip()
        if prefix.endswith(("]", ")")):
            return prefix
        separator = call_site.rfind(LOCATION_SEPARATOR, 0, separator)
    return call_site


def find_method_separator(qualified_name: str) -> int:
    """Finds the dot that separates the containing type from the method name

    The dots nested in brackets (e.g. generic arguments of the type) are skipped. Special names,
    like ``.cctor`` or ``.ctor``, start with the dot; the separator is in such case the dot right
    before them.

    :param str qualified_name: the type and method name, e.g. ``Project.Mod.Data..cctor``
    :return: index of the separator or -1 if the name is not qualified
    """
    depth = 0
    for index in range(len(qualified_name) - 1, -1, -1):
        char = qualified_name[index]
        depth -= signature.depth_change(char)
        if char == "." and depth == 0:
            if index == 0:
                return -1
            if qualified_name[index - 1] == ".":
                return index - 1
            return index
    return -1


def parse_frame(line: str) -> Optional[ExceptionMethod]:
    """Parses one line of the stacktrace into the called method

    The leading ``at`` marker is optional. Lines, that are not frames (blank lines, separators,
    comments, frames without the parameter list, etc.), are not parsed and None is returned.

    :param str line: single line of the stacktrace
    :return: parsed method or None if the line is not a frame
    """
    call_site = line.strip()
    if call_site.startswith(FRAME_MARKER):
        call_site = call_site[len(FRAME_MARKER) :].lstrip()
    call_site, wrapper = strip_wrapper(call_site)
    call_site = strip_location(call_site)

    # IL offset
    il_offset = None
    if call_site.endswith("]"):
        offset_start = signature.find_matching_open(call_site, len(call_site) - 1)
        if offset_start == -1:
            return None
        il_offset = call_site[offset_start + 1 : -1].strip()
        call_site = call_site[:offset_start].rstrip()

    # Parameters
    if not call_site.endswith(")"):
        return None
    params_start = signature.find_matching_open(call_site, len(call_site) - 1)
    if params_start == -1:
        return None
    parameters = signature.parse_parameter_list(call_site[params_start + 1 : -1])
    qualified_name = call_site[:params_start].rstrip()

    # Generic parameters of the method
    generics: tuple[str, ...] = ()
    if qualified_name.endswith("]"):
        generics_start = signature.find_matching_open(qualified_name, len(qualified_name) - 1)
        if generics_start > 0:
            generics = signature.split_generics(qualified_name[generics_start + 1 : -1])
            qualified_name = qualified_name[:generics_start]

    # Method and its containing type
    separator = find_method_separator(qualified_name)
    if separator == -1 and wrapper is not None:
        # older runtimes print the wrapped icalls as e.g. ``object:__icall_wrapper_...``
        separator = qualified_name.rfind(":")
    method = qualified_name[separator + 1 :].strip()
    containing_type = qualified_name[:separator].strip() if separator > 0 else None
    if not method:
        return None

    return ExceptionMethod(
        method=method,
        type=containing_type or None,
        il_offset=il_offset or None,
        parameters=parameters,
        generic_parameters=generics,
        is_native_wrapper=wrapper == NATIVE_WRAPPER,
        is_dynamic_method=wrapper == DYNAMIC_METHOD,
    )
