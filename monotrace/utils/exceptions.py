"""Collection of helper exception classes"""
from __future__ import annotations

# Standard Imports
from typing import Any, TYPE_CHECKING

# Third-Party Imports

# Monotrace Imports

if TYPE_CHECKING:
    import traceback


class MalformedExceptionTextException(Exception):
    """Raised when the parsed text is not an exception with a stacktrace"""

    __slots__ = ["reason", "text"]

    def __init__(self, reason: str, text: str = "") -> None:
        """
        :param str reason: the reason why the text is considered to be malformed
        :param str text: the (part of the) text that could not be parsed
        """
        super().__init__("")
        self.reason = reason
        self.text = text

    def __str__(self) -> str:
        msg = f"malformed exception text: {self.reason}"
        if self.text:
            shortened = self.text if len(self.text) <= 80 else self.text[:77] + "..."
            msg += f" (in '{shortened}')"
        return msg


class InvalidParameterException(Exception):
    """Raises when the given parameter is invalid"""

    __slots__ = ["parameter", "value", "choices_msg"]

    def __init__(self, parameter: str, parameter_value: Any, choices_msg: str = "") -> None:
        """
        :param str parameter: name of the parameter that is invalid
        :param object parameter_value: value of the parameter
        :param str choices_msg: string with choices for the valid parameters
        """
        super().__init__("")
        self.parameter = parameter
        self.value = str(parameter_value)
        self.choices_msg = " " + choices_msg if choices_msg else ""

    def __str__(self) -> str:
        return (
            f"Invalid value '{self.value}' for the parameter '{self.parameter}'" + self.choices_msg
        )


class MissingConfigSectionException(Exception):
    """Raised when the section in config is missing"""

    __slots__ = ["section_key"]

    def __init__(self, section_key: str) -> None:
        super().__init__("")
        self.section_key = section_key

    def __str__(self) -> str:
        return f"key '{self.section_key}' is not specified in configuration."


class SuppressedExceptions:
    """Context manager class for code blocks that need to suppress / ignore some exceptions
    and simply continue in the execution if those exceptions are encountered.

    :ivar list exc: the list of exception classes that should be ignored
    """

    def __init__(self, *exception_list: type[Exception]) -> None:
        """
        :param exception_list: the exception classes to ignore
        """
        self.exc = exception_list

    def __enter__(self) -> "SuppressedExceptions":
        """Context manager entry sentinel, no set up needed

        :return object: the context manager class instance, shouldn't be needed
        """
        return self

    def __exit__(self, exc_type: str, exc_val: Exception, exc_tb: traceback.StackSummary) -> bool:
        """Context manager exit sentinel, check if the code raised an exception and if the
        exception belongs to the list of suppressed exceptions.

        :param type exc_type: the type of the exception
        :param exception exc_val: the value of the exception
        :param traceback exc_tb: the traceback of the exception
        :return bool: True if the encountered exception should be ignored, False otherwise or if
                      no exception was raised
        """
        return isinstance(exc_val, tuple(self.exc))
