"""NavigateAction abstraction for JSONNav.

The navigator only decides WHERE to go. Everything that happens at a visited
node - extracting, copying, validating - is done by a NavigateAction. The
navigator calls back into the action at each significant step, and the
boolean returns of the start/recur hooks steer whether it keeps descending.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, List, Mapping, Optional, Sequence, TYPE_CHECKING

from .path import JSONPath

if TYPE_CHECKING:
    from ..error_policies import FailurePolicy


class PathFailure(Enum):
    """What to do when navigating one path raises an exception.

    Exactly one decision is taken per failure.
    """
    ABORT_SILENTLY = "abort_silently"   # Stop the remaining path set, no error
    FAIL_FAST = "fail_fast"             # Re-raise, aborting the navigation
    CONTINUE = "continue"               # Swallow and move to the next path


class NavigateAction(ABC):
    """Callback interface invoked by JSONNavigator at every traversal event.

    Hooks returning bool steer the traversal: False from a start hook skips
    the corresponding work. All other hooks are informational.

    The action owns all state; the navigator keeps none between events.
    """

    @abstractmethod
    def on_navigation_start(self, root: Optional[Mapping], paths: List[str]) -> bool:
        """Called once before any path is processed.

        Args:
            root: The object being navigated
            paths: The full path set, in order

        Returns:
            False to skip every path (on_navigation_end still fires)
        """
        pass

    @abstractmethod
    def on_next_path(self, path: str) -> bool:
        """Called before navigating a non-empty path.

        Returns:
            False to skip this path
        """
        pass

    @abstractmethod
    def on_path_end(self, path: str) -> None:
        """Called after a path has been fully navigated."""
        pass

    @abstractmethod
    def on_navigation_end(self) -> None:
        """Called once after the path set, unless a failure was raised."""
        pass

    @abstractmethod
    def on_premature_branch_end(self, cursor: JSONPath, node: Any) -> None:
        """Called when the tree ends before the path does.

        Fires when the next segment is missing from an object, or when a
        leaf is reached while segments remain.

        Args:
            cursor: The path cursor, positioned just past the failing segment
            node: The object missing the segment, or the leaf reached
        """
        pass

    @abstractmethod
    def on_object_start_and_recur(self, cursor: JSONPath, obj: Mapping) -> bool:
        """Called when the walk reaches an object.

        Returns:
            True to descend into the object, False to prune it
        """
        pass

    @abstractmethod
    def on_array_start_and_recur(self, cursor: JSONPath, array: Sequence) -> bool:
        """Called when the walk reaches an array.

        Returns:
            True to descend into the array, False to prune it
        """
        pass

    @abstractmethod
    def on_object_leaf(self, cursor: JSONPath, value: Any) -> None:
        """Called when the path ends exactly at a leaf inside an object."""
        pass

    @abstractmethod
    def on_array_leaf(self, index: int, value: Any) -> None:
        """Called for each leaf element of an array the path ends at."""
        pass

    @abstractmethod
    def on_object_end(self, cursor: JSONPath) -> None:
        """Called when the walk of an object branch completes."""
        pass

    @abstractmethod
    def on_array_end(self, cursor: JSONPath) -> None:
        """Called when the walk of an array completes, even if it was empty."""
        pass

    @abstractmethod
    def fail_path_silently(self, path: str, error: Exception) -> bool:
        """Return True to stop the remaining path set without raising."""
        pass

    @abstractmethod
    def fail_path_fast(self, path: str, error: Exception) -> bool:
        """Return True to re-raise the error and abort the navigation."""
        pass

    def on_path_failure(self, path: str, error: Exception) -> PathFailure:
        """Decide how the navigator handles an exception raised for a path.

        fail_path_silently is consulted before fail_path_fast. Override this
        to decide in one step.
        """
        if self.fail_path_silently(path, error):
            return PathFailure.ABORT_SILENTLY
        if self.fail_path_fast(path, error):
            return PathFailure.FAIL_FAST
        return PathFailure.CONTINUE


class DefaultNavigateAction(NavigateAction):
    """NavigateAction that descends everywhere and ignores every event.

    Subclass it and override only the hooks you need. Failure decisions are
    delegated to a FailurePolicy (FailFastPolicy unless one is given).
    """

    def __init__(self, policy: Optional["FailurePolicy"] = None):
        """
        Args:
            policy: How per-path failures are handled (defaults to FailFastPolicy)
        """
        from ..error_policies import FailFastPolicy

        self._policy = policy or FailFastPolicy()
        self._pending: Optional[tuple] = None

    def get_policy(self) -> "FailurePolicy":
        return self._policy

    def set_policy(self, policy: "FailurePolicy") -> None:
        self._policy = policy

    def on_navigation_start(self, root: Optional[Mapping], paths: List[str]) -> bool:
        return True

    def on_next_path(self, path: str) -> bool:
        return True

    def on_path_end(self, path: str) -> None:
        pass

    def on_navigation_end(self) -> None:
        pass

    def on_premature_branch_end(self, cursor: JSONPath, node: Any) -> None:
        pass

    def on_object_start_and_recur(self, cursor: JSONPath, obj: Mapping) -> bool:
        return True

    def on_array_start_and_recur(self, cursor: JSONPath, array: Sequence) -> bool:
        return True

    def on_object_leaf(self, cursor: JSONPath, value: Any) -> None:
        pass

    def on_array_leaf(self, index: int, value: Any) -> None:
        pass

    def on_object_end(self, cursor: JSONPath) -> None:
        pass

    def on_array_end(self, cursor: JSONPath) -> None:
        pass

    def fail_path_silently(self, path: str, error: Exception) -> bool:
        decision = self._policy.decide(path, error)
        # fail_path_fast usually follows for the same failure; let it reuse this
        self._pending = (path, error, decision)
        return decision is PathFailure.ABORT_SILENTLY

    def fail_path_fast(self, path: str, error: Exception) -> bool:
        pending, self._pending = self._pending, None
        if pending is not None and pending[0] == path and pending[1] is error:
            decision = pending[2]
        else:
            decision = self._policy.decide(path, error)
        return decision is PathFailure.FAIL_FAST

    def on_path_failure(self, path: str, error: Exception) -> PathFailure:
        # Ask the policy once; stateful policies count every call.
        self._pending = None
        return self._policy.decide(path, error)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(policy={self._policy.__class__.__name__})"
