"""Parsing of the parts of the method signatures: parameter declarations and generic lists"""
from __future__ import annotations

# Standard Imports
from typing import Optional

# Third-Party Imports

# Monotrace Imports
from monotrace.utils.structs import ExceptionParameter

OPENING_BRACKETS: str = "[<("
CLOSING_BRACKETS: str = "]>)"


def depth_change(char: str) -> int:
    """
    :param str char: inspected character
    :return: +1 for opening bracket, -1 for closing one, 0 otherwise
    """
    if char in OPENING_BRACKETS:
        return 1
    if char in CLOSING_BRACKETS:
        return -1
    return 0


def split_top_level(span: str, delimiter: str = ",") -> list[str]:
    """Splits the span by the delimiter, ignoring the delimiters nested in brackets

    :param str span: split text
    :param str delimiter: single character delimiter
    :return: list of the (unstripped) parts
    """
    parts, depth, boundary_start = [], 0, 0
    for index, char in enumerate(span):
        depth += depth_change(char)
        if char == delimiter and depth == 0:
            parts.append(span[boundary_start:index])
            boundary_start = index + 1
    parts.append(span[boundary_start:])
    return parts


def split_generics(span: str) -> tuple[str, ...]:
    """Splits the list of generic parameters (or arguments) into the names

    E.g. ``TSource, TResult`` is split into ``("TSource", "TResult")``. Nested generic arguments,
    like ``System.Collections.Generic.List`1[T]``, are kept in their slot as they are.

    :param str span: content of the brackets with generic parameters
    :return: tuple of names in the order of declaration
    """
    if not span.strip():
        return ()
    return tuple(part.strip() for part in split_top_level(span))


def find_matching_open(text: str, close_index: int) -> int:
    """Finds the index of the bracket matching the closing bracket at the given index

    The scanning proceeds from right to left, so nested pairs are skipped.

    :param str text: scanned text
    :param int close_index: index of the closing bracket
    :return: index of the matching opening bracket or -1 if there is none
    """
    depth = 0
    for index in range(close_index, -1, -1):
        depth -= depth_change(text[index])
        if depth == 0:
            return index
    return -1


def _is_array_rank(span: str) -> bool:
    """
    :param str span: content of the brackets following the type
    :return: true if the brackets denote the array (e.g. ``[]`` or ``[,]``)
    """
    return not span.replace(",", "").strip()


def split_generic_suffix(declaration: str) -> tuple[str, tuple[str, ...]]:
    """Splits the type declaration into the base type and its generic arguments

    Array suffixes (``[]``, ``[,]``) are not generic arguments and are kept in the type.

    :param str declaration: declaration of the type, e.g. ``System.Collections.Generic.List`1[T]``
    :return: pair of base type and tuple of generic arguments
    """
    if not declaration.endswith("]"):
        return declaration, ()
    open_index = find_matching_open(declaration, len(declaration) - 1)
    content = declaration[open_index + 1 : -1]
    if open_index <= 0 or _is_array_rank(content):
        return declaration, ()
    return declaration[:open_index], split_generics(content)


def parse_parameter(span: str) -> ExceptionParameter:
    """Parses single parameter declaration into its name, type and generic arguments

    The declaration is in form ``Type[`N][[Generic,...]][ Name]``; if there is no space outside
    of the brackets, the declaration contains the type only (e.g. the parameters of the native
    wrappers).

    :param str span: the declaration of the parameter
    :return: parsed parameter
    """
    declaration = span.strip()
    name: Optional[str] = None

    depth = 0
    for index in range(len(declaration) - 1, -1, -1):
        depth -= depth_change(declaration[index])
        if declaration[index] == " " and depth == 0:
            name = declaration[index + 1 :].strip() or None
            declaration = declaration[:index].rstrip()
            break

    base_type, generics = split_generic_suffix(declaration)
    return ExceptionParameter(type=base_type, name=name, generic_parameters=generics)


def parse_parameter_list(span: str) -> tuple[ExceptionParameter, ...]:
    """Parses the comma separated list of parameters

    :param str span: the content of the parenthesis of the method
    :return: tuple of parameters in order of declaration
    """
    if not span.strip():
        return ()
    return tuple(parse_parameter(part) for part in split_top_level(span))
