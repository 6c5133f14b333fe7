"""Parsing core of the monotrace

The core consists of the line scanner (:mod:`monotrace.parse.lines`), the parser of the header
(:mod:`monotrace.parse.header`), the parser of the frames (:mod:`monotrace.parse.frame`) together
with the parser of the parameters and generic lists (:mod:`monotrace.parse.signature`) and the
orchestrator of the whole parsing (:mod:`monotrace.parse.parser`). Run the following to parse the
exception::

    from monotrace.parse import parse
    result = parse(dump)
"""
from __future__ import annotations

from monotrace.parse.parser import parse

__all__ = ["parse"]
