"""Config is a module for storing and managing shared and runtime configuration.

Config provides instances of Configuration objects of two types: shared, which is stored in the
YAML file in the user's config directory and contains the defaults of the monotrace (e.g. the
default output format), and runtime, which is not stored anywhere and serves for temporary
overriding of the keys during one execution of the monotrace command.
"""
from __future__ import annotations

# Standard Imports
from typing import Any, Iterable, Optional
import dataclasses
import os
import re
import sys

# Third-Party Imports
from ruamel.yaml import YAML

# Monotrace Imports
from monotrace.utils import decorators, exceptions, log, streams
from monotrace.utils.common import common_kit

VALID_KEY_PATTERN: re.Pattern[str] = re.compile(r"^[a-zA-Z0-9_]+(\.[a-zA-Z0-9_]+)*$")
SHARED_CONFIG_DEFAULTS: str = """
format:
    output: tree
    table: simple

parse:
    normalize_newlines: true
"""


def is_valid_key(key: str) -> bool:
    """Validation function for key representing one option in config section.

    Validates that the given string key is in form of dot separated (.) strings. Each delimited
    string represents one subsection, with last string representing the option.

    :param str key: string we are validating
    :returns: true if the given key is in correct key format
    """
    return VALID_KEY_PATTERN.match(key) is not None


@dataclasses.dataclass
class Config:
    """Config represents one instance of configuration of given type.

    Configurations are represented by their type and dictionary containing (possibly nested)
    section with concrete keys, such as the following::

        {
            'format': {
                'output': 'tree',
                'table': 'simple'
            },
            'parse': {
                'normalize_newlines': True
            }
        }

    If the path is set, then the config will be saved to the given path, if the config is modified
    during the run.
    """

    __slots__ = ["type", "path", "data"]

    type: str
    path: str
    data: dict[str, Any]

    @decorators.validate_arguments(["key"], is_valid_key)
    def set(self, key: str, value: Any) -> None:
        """Overrides the value of the key in the config.

        :param str key: list of sections separated by dots
        :param object value: value we are writing to the key at config
        """
        *sections, last_section = key.split(".")
        _locate_section_from_query(self.data, sections)[last_section] = value
        if self.path:
            write_config_to(self.path, self.data)

    @decorators.validate_arguments(["key"], is_valid_key)
    def get(self, key: str) -> Any:
        """Returns the value of the key stored in the config.

        :param str key: list of section separated by dots
        :returns value: retrieved value of the key at config
        :raises exceptions.MissingConfigSectionException: if the key is not present in the config
        """
        section_iterator = self.data
        for section in key.split("."):
            section_iterator = _ascend_by_section_safely(section_iterator, section)
        return section_iterator


def write_config_to(path: str, config_data: dict[str, Any]) -> None:
    """Stores the config data on the path

    :param str path: path where the config will be stored to
    :param dict config_data: dictionary with contents of the configuration
    """
    with open(path, "w") as yaml_file:
        YAML().dump(config_data, yaml_file)


def read_config_from(path: str) -> dict[str, Any]:
    """Reads the config data from the path

    :param str path: source path of the config
    :returns: configuration data represented as dictionary of keys and their appropriate values
        (possibly nested); corrupted files are read as empty configuration
    """
    config_data = streams.safely_load_yaml_from_file(path)
    if not config_data:
        log.warn(f"configuration file '{path}' is empty or corrupted, using the defaults")
    return config_data


def init_shared_config_at(path: str) -> None:
    """Creates the new configuration at given path with sane defaults of the output formats and
    the parsing options.

    :param str path: path where the shared config will be initialized
    """
    if not path.endswith("shared.yml") and not path.endswith("shared.yaml"):
        path = os.path.join(path, "shared.yml")
    common_kit.touch_file(path)
    write_config_to(path, streams.safely_load_yaml_from_stream(SHARED_CONFIG_DEFAULTS))


def _locate_section_from_query(config_data: dict[str, Any], sections: list[str]) -> dict[str, Any]:
    """Iterates through the config dictionary and queries the subsections from the list of the
    sections, returning the last one.

    :param dict config_data: dictionary representing yaml configuration
    :param list sections: list of sections in config
    :returns: dictionary representing the section that will be updated
    """
    section_iterator = config_data
    for section in sections:
        if section not in section_iterator.keys():
            section_iterator[section] = {}
        section_iterator = section_iterator[section]
    return section_iterator


def _ascend_by_section_safely(section_iterator: dict[str, Any], section_key: str) -> Any:
    """Ascends by one level in the section_iterator.

    :param dict section_iterator: dictionary
    :param str section_key: section of keys in the stream of nested dictionaries
    :returns: dictionary or the key after ascending by one section key
    :raises exceptions.MissingConfigSectionException: when the given section_key is not found in the
        configuration object.
    """
    if not isinstance(section_iterator, dict) or section_key not in section_iterator:
        raise exceptions.MissingConfigSectionException(section_key)
    return section_iterator[section_key]


def load_config(config_dir: str, config_type: str) -> Config:
    """Loads the configuration of given type from the appropriate file (e.g. shared.yml)

    :param str config_dir: directory, where the config is stored
    :param str config_type: type of the config
    :returns: loaded Config object with populated data and set path and type
    """
    config_file = os.path.join(config_dir, config_type + ".yml")

    try:
        if not os.path.exists(config_file):
            init_shared_config_at(config_file)
        return Config(config_type, config_file, read_config_from(config_file))
    except IOError as io_error:
        log.error(f"error initializing {config_type} config: {str(io_error)}", recoverable=True)
        return Config(config_type, "", streams.safely_load_yaml_from_stream(SHARED_CONFIG_DEFAULTS))


def lookup_shared_config_dir() -> str:
    """Performs a lookup of the shared config dir on the given platform.

    First we check if MONOTRACE_CONFIG_DIR environmental variable is set, otherwise, we try to
    expand the home directory of the user and according to the platform we return the sane
    location: the AppData\\Local\\monotrace on Windows and ~/.config/monotrace elsewhere.

    :returns: dir, where the shared config will be stored
    """
    environment_dir = os.environ.get("MONOTRACE_CONFIG_DIR")
    if environment_dir:
        config_dir = environment_dir
    elif sys.platform == "win32":
        config_dir = os.path.join(os.path.expanduser("~"), "AppData", "Local", "monotrace")
    else:
        config_dir = os.path.join(os.path.expanduser("~"), ".config", "monotrace")

    common_kit.touch_dir(config_dir)
    return config_dir


@decorators.singleton
def shared() -> Config:
    """Returns the configuration corresponding to the shared configuration data

    :returns: shared Config file
    """
    return load_config(lookup_shared_config_dir(), "shared")


@decorators.singleton
def runtime() -> Config:
    """Returns the configuration corresponding to one run of the monotrace command, not stored
    anywhere and serving as a temporary storage of the options given on the command line, which
    override the keys of the shared configuration.

    :returns: runtime temporary config
    """
    return Config("runtime", "", {})


def get_hierarchy() -> Iterable[Config]:
    """Iteratively yields the configurations in the order in which they should be looked up.

    :returns: iterable stream of configurations in the priority order
    """
    yield runtime()
    yield shared()


def lookup_key_recursively(key: str, default: Optional[Any] = None) -> Any:
    """Recursively looks up the key first in the runtime config and then in the shared.

    :param str key: key we are looking up
    :param object default: default value, if key is not located in the hierarchy
    :raises exceptions.MissingConfigSectionException: if the key is not found and there is no
        default
    """
    for config_instance in get_hierarchy():
        with exceptions.SuppressedExceptions(exceptions.MissingConfigSectionException):
            return config_instance.get(key)
    if default is not None:
        return default
    raise exceptions.MissingConfigSectionException(key)
