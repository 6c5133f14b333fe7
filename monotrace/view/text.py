"""Textual views of the parsed exception tree

The module provides two textual representations: the ``mono`` format, i.e. the same format that
is accepted by the parser (so the output of :func:`format_result` can be parsed again into the
equal tree), and the human readable coloured ``tree``.
"""
from __future__ import annotations

# Standard Imports

# Third-Party Imports

# Monotrace Imports
from monotrace.parse import frame, header, parser
from monotrace.utils import log
from monotrace.utils.common import common_kit
from monotrace.utils.structs import ExceptionMethod, ExceptionParameter, ExceptionResult

FRAME_INDENT: str = "  "
BOUNDARY_INDENT: str = "   "
UNKNOWN_LOCATION: str = "<filename unknown>:0"


def format_parameter(parameter: ExceptionParameter) -> str:
    """
    :param ExceptionParameter parameter: formatted parameter
    :return: declaration of the parameter, e.g. ``System.Collections.Generic.List`1[T] items``
    """
    declaration = parameter.type
    if parameter.generic_parameters:
        declaration += "[" + ",".join(parameter.generic_parameters) + "]"
    if parameter.name:
        declaration += " " + parameter.name
    return declaration


def format_method(method: ExceptionMethod) -> str:
    """Formats the frame into the line of the Mono stacktrace

    :param ExceptionMethod method: formatted frame
    :return: single line of the stacktrace (without the newline)
    """
    line = FRAME_INDENT + frame.FRAME_MARKER
    if method.is_native_wrapper:
        line += frame.NATIVE_WRAPPER + " "
    elif method.is_dynamic_method:
        line += frame.DYNAMIC_METHOD + " "
    line += method.qualified_name
    if method.generic_parameters:
        line += "[" + ",".join(method.generic_parameters) + "]"
    line += " (" + ", ".join(format_parameter(param) for param in method.parameters) + ")"
    if method.il_offset:
        line += f" [{method.il_offset}]{frame.LOCATION_SEPARATOR}{UNKNOWN_LOCATION}"
    return line


def format_header(result: ExceptionResult) -> str:
    """Formats the header of the whole chain of exceptions

    :param ExceptionResult result: root of the chain
    :return: the first line of the dump (without the newline)
    """
    segments = [f"{node.type}: {node.message}" for node in result.chain()]
    formatted = f" {header.INNER_EXCEPTION_MARKER} ".join(segments)
    if result.log_message is not None:
        formatted = f"{result.log_message}: {formatted}"
    return formatted


def format_result(result: ExceptionResult) -> str:
    """Formats the parsed tree back into the textual Mono dump

    The frames of the innermost exception are printed first, starting with the throw site, and
    each following (outer) exception is separated by the end of inner exception marker.

    :param ExceptionResult result: root of the formatted chain
    :return: the textual dump ending with the newline
    """
    segments = []
    for node in reversed(list(result.chain())):
        segments.append([format_method(method) for method in reversed(node.stacktrace)])

    output = [format_header(result)]
    for index, segment in enumerate(segments):
        if index:
            output.append(BOUNDARY_INDENT + parser.INNER_STACKTRACE_END)
        output.extend(segment)
    return "\n".join(output) + "\n"


def render_method(method: ExceptionMethod) -> str:
    """Renders the frame as a coloured line

    :param ExceptionMethod method: rendered frame
    :return: coloured representation of the frame
    """
    rendered = ""
    if method.is_native_wrapper:
        rendered += log.tag("native", common_kit.WRAPPER_COLOUR) + " "
    if method.is_dynamic_method:
        rendered += log.tag("dynamic", common_kit.WRAPPER_COLOUR) + " "
    if method.type:
        rendered += log.in_color(method.type, common_kit.FRAME_TYPE_COLOUR) + "."
    rendered += log.in_color(method.method, common_kit.FRAME_METHOD_COLOUR, common_kit.FRAME_ATTRS)
    if method.generic_parameters:
        rendered += "[" + ", ".join(method.generic_parameters) + "]"
    rendered += "(" + ", ".join(format_parameter(param) for param in method.parameters) + ")"
    if method.il_offset:
        rendered += " " + log.in_color(f"[{method.il_offset}]", common_kit.IL_OFFSET_COLOUR)
    return rendered


def render_tree(result: ExceptionResult) -> str:
    """Renders the chain of the exceptions as the human readable tree

    Each exception is rendered with its type, message and its frames, ordered from the throw
    site to the outermost call. Inner exceptions are indented under the exception wrapping them.

    :param ExceptionResult result: root of the rendered chain
    :return: rendered tree
    """
    output = []
    if result.log_message:
        output.append(log.in_color(result.log_message, common_kit.LOG_MESSAGE_COLOUR))
    for depth, node in enumerate(result.chain()):
        indent = "  " * depth
        prefix = "" if depth == 0 else "caused by "
        output.append(
            indent
            + prefix
            + log.in_color(node.type, common_kit.EXCEPTION_TYPE_COLOUR, common_kit.HEADER_ATTRS)
            + ": "
            + node.message
        )
        frame_count = common_kit.str_to_plural(len(node.stacktrace), "frame")
        output.append(f"{indent}  ({frame_count})")
        for method in reversed(node.stacktrace):
            output.append(f"{indent}  - {render_method(method)}")
    return "\n".join(output)
