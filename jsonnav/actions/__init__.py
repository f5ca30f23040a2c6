"""Ready-made NavigateActions.

Each action covers one common "act on a subset of the tree" use case.
Subclass DefaultNavigateAction for anything else.
"""

from .copy_paths import CopyPathsAction, merge_trees
from .collect_values import CollectValuesAction
from .validate_paths import ValidatePathsAction

__all__ = [
    'CopyPathsAction',
    'CollectValuesAction',
    'ValidatePathsAction',
    'merge_trees',
]
