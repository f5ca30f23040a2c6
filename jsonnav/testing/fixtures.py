"""Test fixtures for JSONNav consumers.

EventRecorder is an action that writes down every event the navigator
fires, so tests can assert on the exact sequence of callbacks without
writing a NavigateAction of their own.
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from ..core.action import DefaultNavigateAction
from ..core.path import JSONPath


class EventRecorder(DefaultNavigateAction):
    """Records every navigation event as a tuple.

    Each entry in ``events`` is ``(event_name, *details)``. Cursors are
    recorded as their origin plus the current segment or position at the
    time of the event, since the live cursor keeps moving.

    Example:
        recorder = EventRecorder()
        JSONNavigator(recorder, ["k1.k2"]).navigate(tree)
        assert recorder.of('object_leaf') == [('object_leaf', 'k1.k2', 'k2', 'v1')]

    Args:
        start: Return value of on_navigation_start
        next_path: Return value of on_next_path
        recur_objects: Return value of on_object_start_and_recur
        recur_arrays: Return value of on_array_start_and_recur
        raise_on: Maps an event name to an exception raised when it fires
        policy: Failure policy (fail-fast by default)
    """

    def __init__(self,
                 start: bool = True,
                 next_path: bool = True,
                 recur_objects: bool = True,
                 recur_arrays: bool = True,
                 raise_on: Optional[Dict[str, Exception]] = None,
                 policy=None):
        super().__init__(policy)
        self.start = start
        self.next_path = next_path
        self.recur_objects = recur_objects
        self.recur_arrays = recur_arrays
        self.raise_on = raise_on or {}
        self.events: List[Tuple[Any, ...]] = []

    def names(self) -> List[str]:
        """Return just the event names, in order."""
        return [event[0] for event in self.events]

    def of(self, name: str) -> List[Tuple[Any, ...]]:
        """Return the recorded events with the given name."""
        return [event for event in self.events if event[0] == name]

    def _record(self, name: str, *details: Any) -> None:
        self.events.append((name,) + details)
        error = self.raise_on.get(name)
        if error is not None:
            raise error

    def on_navigation_start(self, root: Optional[Mapping], paths: List[str]) -> bool:
        self._record('navigation_start', list(paths))
        return self.start

    def on_next_path(self, path: str) -> bool:
        self._record('next_path', path)
        return self.next_path

    def on_path_end(self, path: str) -> None:
        self._record('path_end', path)

    def on_navigation_end(self) -> None:
        self._record('navigation_end')

    def on_premature_branch_end(self, cursor: JSONPath, node: Any) -> None:
        self._record('premature_branch_end', cursor.origin(), cursor.curr(), node)

    def on_object_start_and_recur(self, cursor: JSONPath, obj: Mapping) -> bool:
        self._record('object_start', cursor.origin(), cursor.curr())
        return self.recur_objects

    def on_array_start_and_recur(self, cursor: JSONPath, array: Sequence) -> bool:
        self._record('array_start', cursor.origin(), cursor.curr(), len(array))
        return self.recur_arrays

    def on_object_leaf(self, cursor: JSONPath, value: Any) -> None:
        self._record('object_leaf', cursor.origin(), cursor.curr(), value)

    def on_array_leaf(self, index: int, value: Any) -> None:
        self._record('array_leaf', index, value)

    def on_object_end(self, cursor: JSONPath) -> None:
        self._record('object_end', cursor.origin(), cursor.position())

    def on_array_end(self, cursor: JSONPath) -> None:
        self._record('array_end', cursor.origin(), cursor.position())

    def on_path_failure(self, path, error):
        decision = super().on_path_failure(path, error)
        self.events.append(('path_failure', path, type(error).__name__, decision))
        return decision
