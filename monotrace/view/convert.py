"""``monotrace.view.convert`` specifies the conversion of the parsed exception tree to plain
dictionaries (and back), that can be further dumped e.g. to yaml or json.

The conversion is lossless, i.e. the following holds for every parsed ``result``::

    >>> convert.result_from_dict(convert.result_to_dict(result)) == result
    True
"""
from __future__ import annotations

# Standard Imports
from typing import Any, Optional

# Third-Party Imports

# Monotrace Imports
from monotrace.utils.structs import ExceptionMethod, ExceptionParameter, ExceptionResult


def parameter_to_dict(parameter: ExceptionParameter) -> dict[str, Any]:
    """
    :param ExceptionParameter parameter: converted parameter
    :return: dictionary representation of the parameter
    """
    return {
        "name": parameter.name,
        "type": parameter.type,
        "generic_parameters": list(parameter.generic_parameters),
    }


def method_to_dict(method: ExceptionMethod) -> dict[str, Any]:
    """
    :param ExceptionMethod method: converted frame
    :return: dictionary representation of the frame
    """
    return {
        "type": method.type,
        "method": method.method,
        "il_offset": method.il_offset,
        "parameters": [parameter_to_dict(param) for param in method.parameters],
        "generic_parameters": list(method.generic_parameters),
        "is_native_wrapper": method.is_native_wrapper,
        "is_dynamic_method": method.is_dynamic_method,
    }


def result_to_dict(result: ExceptionResult) -> dict[str, Any]:
    """Converts the whole chain of exceptions into nested dictionaries

    :param ExceptionResult result: root of the converted chain
    :return: dictionary representation of the chain
    """
    return {
        "log_message": result.log_message,
        "type": result.type,
        "message": result.message,
        "stacktrace": [method_to_dict(method) for method in result.stacktrace],
        "inner_exception": (
            result_to_dict(result.inner_exception) if result.inner_exception else None
        ),
    }


def parameter_from_dict(data: dict[str, Any]) -> ExceptionParameter:
    """
    :param dict data: dictionary representation of the parameter
    :return: the parameter
    """
    return ExceptionParameter(
        type=data["type"],
        name=data.get("name"),
        generic_parameters=tuple(data.get("generic_parameters", ())),
    )


def method_from_dict(data: dict[str, Any]) -> ExceptionMethod:
    """
    :param dict data: dictionary representation of the frame
    :return: the frame
    """
    return ExceptionMethod(
        method=data["method"],
        type=data.get("type"),
        il_offset=data.get("il_offset"),
        parameters=tuple(parameter_from_dict(param) for param in data.get("parameters", ())),
        generic_parameters=tuple(data.get("generic_parameters", ())),
        is_native_wrapper=bool(data.get("is_native_wrapper", False)),
        is_dynamic_method=bool(data.get("is_dynamic_method", False)),
    )


def result_from_dict(data: dict[str, Any]) -> ExceptionResult:
    """Converts the nested dictionaries back to the chain of exceptions

    :param dict data: dictionary representation of the chain
    :return: root of the chain
    """
    inner: Optional[dict[str, Any]] = data.get("inner_exception")
    return ExceptionResult(
        type=data["type"],
        message=data["message"],
        log_message=data.get("log_message"),
        inner_exception=result_from_dict(inner) if inner else None,
        stacktrace=tuple(method_from_dict(method) for method in data.get("stacktrace", ())),
    )
