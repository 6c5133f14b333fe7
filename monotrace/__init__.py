"""Monotrace is a parser of textual exception dumps produced by Mono (and thus Unity engine games)

Monotrace takes the stringified exception, i.e. the optional log message, the exception header,
the chain of inner exceptions and the interleaved stack of the call frames, and turns it into an
immutable object tree, that can be further used by other tools, e.g. by a bot that reports the
diagnostics of the crashes to its users.

Monotrace consists of the parsing core (see :mod:`monotrace.parse`), set of views, which can
render the parsed tree as a tree, table, yaml, json or back as a textual Mono dump, and a command
line interface.
"""
from __future__ import annotations

import importlib.metadata

__version__ = importlib.metadata.version("monotrace")
