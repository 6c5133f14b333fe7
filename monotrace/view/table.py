"""Tabular view of the frames of the parsed exception"""
from __future__ import annotations

# Standard Imports
from typing import Any

# Third-Party Imports
import tabulate

# Monotrace Imports
from monotrace.utils.structs import ExceptionResult

TABLE_HEADERS: list[str] = [
    "depth",
    "exception",
    "type",
    "method",
    "params",
    "il offset",
    "wrapper",
]


def frames_to_rows(result: ExceptionResult) -> list[list[Any]]:
    """Flattens the frames of the whole chain into the rows of the table

    The rows are ordered in the same way as in the printed stacktrace, i.e. the frames of the
    innermost exception go first, each starting with its throw site.

    :param ExceptionResult result: root of the chain
    :return: list of rows
    """
    rows = []
    chain = list(result.chain())
    for depth in range(len(chain) - 1, -1, -1):
        node = chain[depth]
        for method in reversed(node.stacktrace):
            wrapper = ""
            if method.is_native_wrapper:
                wrapper = "native"
            elif method.is_dynamic_method:
                wrapper = "dynamic"
            rows.append(
                [
                    depth,
                    node.type,
                    method.type or "",
                    method.method,
                    len(method.parameters),
                    method.il_offset or "",
                    wrapper,
                ]
            )
    return rows


def frames_to_table(result: ExceptionResult, table_format: str = "simple") -> str:
    """Using the tabulate package, transforms the frames of the exception into table.

    :param ExceptionResult result: root of the chain
    :param str table_format: format of the table supported by tabulate
    :return: tabular representation of the frames in string
    """
    return tabulate.tabulate(frames_to_rows(result), headers=TABLE_HEADERS, tablefmt=table_format)
