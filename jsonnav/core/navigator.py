"""Path-driven navigation for JSONNav.

JSONNavigator walks only the branches of a JSON object named by a set of
dot-delimited paths. For each path it follows the segments key by key,
fans out across arrays of objects, and reports every step to a
NavigateAction.

Example:
    To navigate the branch k1.k2 of {"k1": {"k2": "v1"}, "k3": {"k4": "v2"}}:

    >>> navigator = JSONNavigator(action, ["k1.k2"])
    >>> navigator.navigate(tree)
"""

from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple, Union, TYPE_CHECKING

from .action import NavigateAction, PathFailure
from .node import NodeKind, kind_of
from .path import DEFAULT_DELIMITER, JSONPath

if TYPE_CHECKING:
    from ..config import NavigationConfig


class NavigationError(Exception):
    """Base class for errors raised while navigating a path."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class NestedArrayError(NavigationError, ValueError):
    """Raised when an array is found directly inside another array."""

    def __init__(self, path: str):
        super().__init__(
            f"illegal json - found array nested inside array at: '{path}'",
            path=path,
        )


class PathNotFoundError(NavigationError, KeyError):
    """Raised by strict actions when the tree ends before the path does."""

    def __init__(self, path: str, branch: str = ""):
        super().__init__(
            f"branch is shorter than path - path not found in source: '{path}'",
            path=path,
        )
        self.branch = branch

    def __str__(self) -> str:
        # KeyError would repr() the message
        return self.args[0]


def normalize_paths(paths: Union[None, str, Iterable[Optional[str]]]) -> Tuple[Optional[str], ...]:
    """Turn the accepted path-set shapes into an ordered tuple.

    Accepts None, a single path string, or any iterable of paths.
    Entries are kept as given (including None and ""); the navigator skips
    empty entries when it reaches them.
    """
    if paths is None:
        return ()
    if isinstance(paths, str):
        return (paths,)
    return tuple(paths)


class JSONNavigator:
    """Navigates only the branches of a JSON object matching the given paths.

    The navigator keeps no state between calls beyond its action and path
    set, so one instance can navigate any number of trees.
    """

    def __init__(self,
                 action: NavigateAction,
                 paths: Union[None, str, Iterable[Optional[str]]] = None,
                 delimiter: str = DEFAULT_DELIMITER):
        """Create a navigator.

        Args:
            action: Callback receiving every traversal event
            paths: Paths to navigate - None, a single string or an iterable
            delimiter: Path segment separator

        Raises:
            ValueError: If action is None or delimiter is empty
        """
        if action is None:
            raise ValueError("NavigateAction cannot be None")
        if not delimiter:
            raise ValueError("delimiter cannot be empty")
        self.action = action
        self.paths = normalize_paths(paths)
        self.delimiter = delimiter

    @classmethod
    def from_config(cls, action: NavigateAction, config: "NavigationConfig") -> "JSONNavigator":
        """Create a navigator from a validated NavigationConfig.

        If the config carries a policy and the action accepts one, the
        policy is installed on the action.

        Raises:
            ConfigurationError: If the config does not validate
        """
        from ..config import ConfigurationError

        errors = config.validate()
        if errors:
            raise ConfigurationError(f"Invalid configuration: {'; '.join(errors)}")
        if config.policy is not None and hasattr(action, 'set_policy'):
            action.set_policy(config.policy)
        return cls(action, config.paths, delimiter=config.delimiter)

    def navigate(self, root: Optional[Mapping]) -> None:
        """Navigate every configured path through root.

        Args:
            root: The JSON object to navigate

        Raises:
            Exception: Whatever a path raised, when the action chose FAIL_FAST
        """
        paths: List[Optional[str]] = list(self.paths)
        if self.action.on_navigation_start(root, paths):
            for path in paths:
                if not path:
                    continue
                try:
                    if self.action.on_next_path(path):
                        cursor = JSONPath(path, self.delimiter)
                        self.walk_object(root, cursor)
                        self.action.on_path_end(path)
                except Exception as e:
                    decision = self.action.on_path_failure(path, e)
                    if decision is PathFailure.ABORT_SILENTLY:
                        break
                    if decision is PathFailure.FAIL_FAST:
                        raise
        self.action.on_navigation_end()

    def walk_object(self, node: Optional[Mapping], cursor: JSONPath) -> None:
        """Follow the next segment of cursor inside an object."""
        if node is None:
            return
        if cursor.has_next():
            key = cursor.next()
            if key not in node:
                # Path names a deeper branch than the tree has
                self.action.on_premature_branch_end(cursor, node)
            else:
                self._visit_child(node[key], cursor)
        self.action.on_object_end(cursor)

    def _visit_child(self, child: Any, cursor: JSONPath) -> None:
        kind = kind_of(child)
        if kind is NodeKind.OBJECT and self.action.on_object_start_and_recur(cursor, child):
            self.walk_object(child, cursor)
        elif kind is NodeKind.ARRAY and self.action.on_array_start_and_recur(cursor, child):
            self.walk_array(child, cursor)
        elif cursor.has_next():
            # Leaf (or pruned container) reached while the path continues
            self.action.on_premature_branch_end(cursor, child)
        else:
            self.action.on_object_leaf(cursor, child)

    def walk_array(self, array: Optional[Sequence], cursor: JSONPath) -> None:
        """Fan the remaining path out across the elements of an array."""
        if array is None:
            return
        for index, item in enumerate(array):
            kind = kind_of(item)
            if kind is NodeKind.OBJECT and self.action.on_object_start_and_recur(cursor, item):
                # Each object resumes from the same path position
                self.walk_object(item, cursor.clone())
            elif kind is NodeKind.ARRAY:
                raise NestedArrayError(cursor.origin())
            elif not cursor.has_next():
                self.action.on_array_leaf(index, item)
        self.action.on_array_end(cursor)

    def __repr__(self) -> str:
        return f"JSONNavigator({self.action!r}, paths={list(self.paths)!r})"
