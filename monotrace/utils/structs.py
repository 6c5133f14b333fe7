"""List of structures of the parsed exception tree

The exception tree consists of the chain of :class:`ExceptionResult` nodes, where each node owns
its inner exception (if there is any) and its own part of the stacktrace, i.e. the sequence of
:class:`ExceptionMethod` frames. All the structures are immutable; the tree is constructed once
by :func:`monotrace.parse.parse` and is never modified afterwards.
"""
from __future__ import annotations

# Standard Imports
from dataclasses import dataclass, field
from typing import Iterator, Optional
import enum

# Third-Party Imports

# Monotrace Imports


class HeaderMode(enum.Enum):
    """Determines whether the parsed header can be prefixed by a log message"""

    ALLOW_LOG_MESSAGE = 0
    SUPPRESS_LOG_MESSAGE = 1


class HeaderParsePosition(enum.Enum):
    """States of the header parsing"""

    NONE = 0
    EXCEPTION_TYPE = 1
    EXCEPTION_MESSAGE = 2


@dataclass(frozen=True)
class ExceptionParameter:
    """Single declared parameter of the method in the frame

    :ivar str name: name of the parameter, None if the trace omits the names
    :ivar str type: qualified name of the type of the parameter, without generic arguments
    :ivar tuple generic_parameters: generic arguments of the type of the parameter
    """

    type: str
    name: Optional[str] = None
    generic_parameters: tuple[str, ...] = ()


@dataclass(frozen=True)
class ExceptionMethod:
    """Single method call (frame) within an exception stacktrace

    :ivar str type: the qualified name of the type that contains the called method
    :ivar str method: the name of the called method (special names like ``.cctor`` are kept)
    :ivar str il_offset: the optional IL offset token, kept as it was in the trace
    :ivar tuple parameters: parameters the called method was declared with, in declaration order
    :ivar tuple generic_parameters: names of the generic parameters of the method
    :ivar bool is_native_wrapper: whether the frame is a wrapper of a native method
    :ivar bool is_dynamic_method: whether the frame is a dynamically generated method
    """

    method: str
    type: Optional[str] = None
    il_offset: Optional[str] = None
    parameters: tuple[ExceptionParameter, ...] = ()
    generic_parameters: tuple[str, ...] = ()
    is_native_wrapper: bool = False
    is_dynamic_method: bool = False

    @property
    def qualified_name(self) -> str:
        """
        :return: the name of the method qualified by its containing type (if known)
        """
        return f"{self.type}.{self.method}" if self.type else self.method


@dataclass(frozen=True)
class ExceptionResult:
    """Single node of the parsed chain of exceptions

    The stacktrace is ordered from the outermost method to the innermost one, i.e. in the printed
    trace it is ordered from the bottom to the top. It contains only the calls that lead up to
    this exception; if there is an inner exception, the calls that lead up to it are stored in
    the inner node.

    :ivar str type: the qualified name of the thrown exception type
    :ivar str message: the message that accompanied the thrown exception
    :ivar str log_message: the optional log message the exception was prefixed with; filled only
        for the outermost exception
    :ivar ExceptionResult inner_exception: the exception that was wrapped by this one
    :ivar tuple stacktrace: the list of method calls that lead to the exception
    """

    type: str
    message: str
    log_message: Optional[str] = None
    inner_exception: Optional[ExceptionResult] = None
    stacktrace: tuple[ExceptionMethod, ...] = field(default=())

    def chain(self) -> Iterator[ExceptionResult]:
        """Iterates through this exception and all of its inner exceptions

        :return: iterator of the chain, starting with this node
        """
        current: Optional[ExceptionResult] = self
        while current is not None:
            yield current
            current = current.inner_exception

    @property
    def depth(self) -> int:
        """
        :return: number of nodes in the chain starting with this node
        """
        return sum(1 for _ in self.chain())

    @property
    def innermost(self) -> ExceptionResult:
        """
        :return: the last exception in the chain, i.e. the original cause
        """
        *_, last = self.chain()
        return last
