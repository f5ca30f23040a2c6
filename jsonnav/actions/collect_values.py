"""Collect the values found at the end of each path."""

from typing import Any, Dict, List, Mapping, Optional

from ..core.action import DefaultNavigateAction
from ..core.path import JSONPath


class CollectValuesAction(DefaultNavigateAction):
    """Maps every navigated path to the values reached at its end.

    Arrays of objects fan out, so "a.b" over {"a": [{"b": 1}, {"b": 2}]}
    collects [1, 2]. An array reached at the end of a path contributes its
    elements one by one; an object reached at the end of a path is collected
    whole. Paths that end nowhere map to an empty list.
    """

    def __init__(self, policy=None):
        super().__init__(policy)
        self._values: Dict[str, List[Any]] = {}
        self._current: Optional[List[Any]] = None

    def values(self) -> Dict[str, List[Any]]:
        return self._values

    def on_navigation_start(self, root: Optional[Mapping], paths: List[str]) -> bool:
        self._values = {}
        return True

    def on_next_path(self, path: str) -> bool:
        self._current = self._values.setdefault(path, [])
        return True

    def on_object_start_and_recur(self, cursor: JSONPath, obj: Mapping) -> bool:
        # Objects at the end of a path are delivered as leaves
        return cursor.has_next()

    def on_object_leaf(self, cursor: JSONPath, value: Any) -> None:
        self._current.append(value)

    def on_array_leaf(self, index: int, value: Any) -> None:
        self._current.append(value)
