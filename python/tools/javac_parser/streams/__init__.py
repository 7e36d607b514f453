"""
Line sources and event sinks the parser is wired between.
"""

from .line_source import LineSource, PushbackLineSource, strip_line_terminator
from .sinks import CollectingSink, EventSink, LoggingSink

__all__ = [
    "LineSource",
    "PushbackLineSource",
    "strip_line_terminator",
    "CollectingSink",
    "EventSink",
    "LoggingSink",
]
