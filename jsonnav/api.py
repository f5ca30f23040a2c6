"""High-level API for JSONNav.

This module provides simple, functional interfaces for common navigation
tasks. These functions wrap JSONNavigator and the ready-made actions for
ease of use in simple cases.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from .core.action import NavigateAction
from .core.navigator import JSONNavigator
from .core.path import DEFAULT_DELIMITER
from .actions import CopyPathsAction, CollectValuesAction, ValidatePathsAction
from .error_policies import FailurePolicy

Paths = Union[None, str, Iterable[Optional[str]]]


def navigate(
    root: Optional[Mapping],
    action: NavigateAction,
    paths: Paths,
    delimiter: str = DEFAULT_DELIMITER
) -> NavigateAction:
    """Navigate paths through root, reporting to action.

    Args:
        root: JSON object to navigate
        action: Callback receiving the traversal events
        paths: A path string or an iterable of path strings
        delimiter: Path segment separator

    Returns:
        The action, for chaining result accessors

    Example:
        >>> values = navigate(tree, CollectValuesAction(), "k1.k2").values()
    """
    JSONNavigator(action, paths, delimiter=delimiter).navigate(root)
    return action


def copy_paths(
    root: Optional[Mapping],
    paths: Paths,
    strict: bool = True,
    policy: Optional[FailurePolicy] = None,
    delimiter: str = DEFAULT_DELIMITER
) -> Optional[dict]:
    """Copy only the given paths of root into a new object.

    Args:
        root: JSON object to copy from
        paths: Paths to keep
        strict: Raise PathNotFoundError for paths missing from root
        policy: Failure policy (fail-fast by default)
        delimiter: Path segment separator

    Returns:
        New object holding the selected branches (None if root is None)

    Example:
        >>> copy_paths({"k1": {"k2": "v1"}, "k3": {"k4": "v2"}}, ["k1.k2"])
        {'k1': {'k2': 'v1'}}
    """
    action = CopyPathsAction(strict=strict, policy=policy)
    return navigate(root, action, paths, delimiter).result()


def extract_values(
    root: Optional[Mapping],
    paths: Paths,
    policy: Optional[FailurePolicy] = None,
    delimiter: str = DEFAULT_DELIMITER
) -> Dict[str, List[Any]]:
    """Collect the values found at the end of each path.

    Example:
        >>> extract_values({"a": [{"b": 1}, {"b": 2}]}, "a.b")
        {'a.b': [1, 2]}
    """
    action = CollectValuesAction(policy=policy)
    return navigate(root, action, paths, delimiter).values()


def missing_paths(
    root: Optional[Mapping],
    paths: Paths,
    policy: Optional[FailurePolicy] = None,
    delimiter: str = DEFAULT_DELIMITER
) -> List[str]:
    """Return the paths missing from root, in order.

    A path is present when it reaches at least one value and never ends
    early. With a None root every path is missing.
    """
    action = ValidatePathsAction(policy=policy)
    return navigate(root, action, paths, delimiter).missing_paths()


def has_paths(
    root: Optional[Mapping],
    paths: Paths,
    delimiter: str = DEFAULT_DELIMITER
) -> bool:
    """Check that every path exists in root."""
    return not missing_paths(root, paths, delimiter=delimiter)
