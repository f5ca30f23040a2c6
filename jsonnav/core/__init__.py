"""Core abstractions for JSONNav.

This module contains the path cursor, the action interface and the
navigator that ties them together.
"""

from .node import NodeKind, kind_of
from .path import JSONPath, DEFAULT_DELIMITER
from .action import NavigateAction, DefaultNavigateAction, PathFailure
from .navigator import (
    JSONNavigator,
    NavigationError,
    NestedArrayError,
    PathNotFoundError,
    normalize_paths,
)

__all__ = [
    "NodeKind",
    "kind_of",
    "JSONPath",
    "DEFAULT_DELIMITER",
    "NavigateAction",
    "DefaultNavigateAction",
    "PathFailure",
    "JSONNavigator",
    "NavigationError",
    "NestedArrayError",
    "PathNotFoundError",
    "normalize_paths",
]
