"""Set of helper decorators used within the monotrace.

Contains the caching of the configurations (singletons) and the validation of the arguments
of the functions (e.g. the keys of the configuration).
"""
from __future__ import annotations

# Standard Imports
from typing import Callable, Any
import functools
import inspect

# Third-Party Imports

# Monotrace Imports
from monotrace.utils.exceptions import InvalidParameterException


registered_singletons: list[Callable[[], Any]] = []


def singleton(func: Callable[[], Any]) -> Callable[[], Any]:
    """Caches the result of the first call of the parameterless @p func

    The cached configurations (and other singletons) are registered, so the tests and the
    repeated invocations of the CLI can drop them through :func:`reset_singletons`.

    :param func: function without parameters returning the cached value
    :returns: decorated function that computes the value only once
    """
    func.instance = None  # type: ignore
    registered_singletons.append(func)

    @functools.wraps(func)
    def wrapper() -> Any:
        if func.instance is None:  # type: ignore
            func.instance = func()  # type: ignore
        return func.instance  # type: ignore

    return wrapper


def reset_singletons() -> None:
    """Drops the cached values of all singletons, so they are recomputed on next call"""
    for singleton_func in registered_singletons:
        singleton_func.instance = None  # type: ignore


def validate_arguments(
    validated_args: list[str], validate: Callable[..., bool], *args: Any, **kwargs: Any
) -> Callable[..., Any]:
    """
    Validates the arguments stated by validated_args with validate function.
    Note that positional and kwarguments are not supported by this decorator

    :param list[str] validated_args: list of validated arguments
    :param function validate: function used for validation
    :param list args: list of additional positional arguments to validate function
    :param dict kwargs: dictionary of additional keyword arguments to validate function
    :returns func: decorated function for which given parameters will be validated
    """

    def inner_decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        """Wrapper function of the @p func"""
        f_args, *_ = inspect.getfullargspec(func)

        @functools.wraps(func)
        def wrapper(*wargs: Any, **wkwargs: Any) -> Any:
            """Wrapper function of the wrapper inner decorator"""
            params = list(zip(f_args[: len(wargs)], wargs)) + list(wkwargs.items())

            for param_name, param_value in params:
                if param_name not in validated_args:
                    continue
                if not validate(param_value, *args, **kwargs):
                    raise InvalidParameterException(param_name, param_value)

            return func(*wargs, **wkwargs)

        return wrapper

    return inner_decorator
