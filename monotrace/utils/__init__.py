"""Utils contains helper modules, that are not directly dependent on the parsing core.

Utils contains various helper modules and functions, like e.g. the data structures of the parsed
exception tree, helper decorators, exceptions, logs or loading of the streams.
"""
