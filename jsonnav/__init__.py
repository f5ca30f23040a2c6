"""JSONNav - Selective JSON Navigation.

JSONNav walks only the branches of a parsed JSON object named by a set of
dot-delimited paths, and calls back into a NavigateAction at every step.
Write the action once and get extraction, copying or validation of any
subset of a document without a hand-written recursive walker.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from jsonnav import JSONNavigator, DefaultNavigateAction

    class PrintLeaves(DefaultNavigateAction):
        def on_object_leaf(self, cursor, value):
            print(cursor.origin(), value)

    JSONNavigator(PrintLeaves(), ["k1.k2"]).navigate(tree)

Or use the one-call helpers:

    from jsonnav import copy_paths, extract_values
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

# Core components
from .core.node import NodeKind, kind_of
from .core.path import JSONPath
from .core.action import NavigateAction, DefaultNavigateAction, PathFailure
from .core.navigator import (
    JSONNavigator,
    NavigationError,
    NestedArrayError,
    PathNotFoundError,
)

# Failure policies
from .error_policies import (
    FailurePolicy,
    FailFastPolicy,
    AbortSilentlyPolicy,
    ContinueOnErrorsPolicy,
    CollectErrorsPolicy,
    ThresholdPolicy,
)

# Configuration
from .config import NavigationConfig, ConfigurationError

# Actions
from .actions import CopyPathsAction, CollectValuesAction, ValidatePathsAction

# High-level API
from .api import (
    navigate,
    copy_paths,
    extract_values,
    missing_paths,
    has_paths,
)

__all__ = [
    "__version__",
    # Core
    "NodeKind",
    "kind_of",
    "JSONPath",
    "NavigateAction",
    "DefaultNavigateAction",
    "PathFailure",
    "JSONNavigator",
    "NavigationError",
    "NestedArrayError",
    "PathNotFoundError",
    # Policies
    "FailurePolicy",
    "FailFastPolicy",
    "AbortSilentlyPolicy",
    "ContinueOnErrorsPolicy",
    "CollectErrorsPolicy",
    "ThresholdPolicy",
    # Config
    "NavigationConfig",
    "ConfigurationError",
    # Actions
    "CopyPathsAction",
    "CollectValuesAction",
    "ValidatePathsAction",
    # API
    "navigate",
    "copy_paths",
    "extract_values",
    "missing_paths",
    "has_paths",
]
