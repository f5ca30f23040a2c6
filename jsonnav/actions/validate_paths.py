"""Check which paths exist in a JSON object."""

from typing import Any, List, Mapping, Optional, Sequence, Tuple

from ..core.action import DefaultNavigateAction
from ..core.navigator import PathNotFoundError
from ..core.path import JSONPath


class ValidatePathsAction(DefaultNavigateAction):
    """Records every point where the tree ends before a path does.

    missing() lists (path, branch) pairs, where branch is the prefix of the
    path up to and including the segment that could not be followed. A path
    fanning out across an array is reported once per element missing it.
    found() lists the paths that reached at least one value at their last
    segment without any premature end.

    A path that reaches no value at all is missing even when no premature
    end fired: a None root (branch ""), an empty array along the path, or
    an array holding only leaves where the path goes deeper. Its branch is
    the deepest prefix the navigator walked.

    With strict=True the first missing path raises PathNotFoundError, which
    the failure policy (fail-fast by default) then propagates.
    """

    def __init__(self, strict: bool = False, policy=None):
        super().__init__(policy)
        self.strict = strict
        self._missing: List[Tuple[str, str]] = []
        self._found: List[str] = []
        self._path_ok = True
        self._reached = False
        self._deepest = ""

    def missing(self) -> List[Tuple[str, str]]:
        return self._missing

    def missing_paths(self) -> List[str]:
        """Distinct paths recorded as missing, in order."""
        seen = []
        for path, _ in self._missing:
            if path not in seen:
                seen.append(path)
        return seen

    def found(self) -> List[str]:
        return self._found

    def is_valid(self) -> bool:
        return not self._missing

    def on_navigation_start(self, root: Optional[Mapping], paths: List[str]) -> bool:
        self._missing = []
        self._found = []
        return True

    def on_next_path(self, path: str) -> bool:
        self._path_ok = True
        self._reached = False
        self._deepest = ""
        return True

    def on_premature_branch_end(self, cursor: JSONPath, node: Any) -> None:
        if self.strict:
            raise PathNotFoundError(cursor.origin(), cursor.current_path())
        self._path_ok = False
        self._missing.append((cursor.origin(), cursor.current_path()))

    def on_object_start_and_recur(self, cursor: JSONPath, obj: Mapping) -> bool:
        return cursor.has_next()

    def on_array_start_and_recur(self, cursor: JSONPath, array: Sequence) -> bool:
        return cursor.has_next()

    def on_object_leaf(self, cursor: JSONPath, value: Any) -> None:
        self._reached = True

    def on_array_leaf(self, index: int, value: Any) -> None:
        self._reached = True

    def on_object_end(self, cursor: JSONPath) -> None:
        self._walked(cursor)

    def on_array_end(self, cursor: JSONPath) -> None:
        self._walked(cursor)

    def on_path_end(self, path: str) -> None:
        if not self._path_ok:
            return
        if self._reached:
            self._found.append(path)
            return
        if self.strict:
            raise PathNotFoundError(path, self._deepest)
        self._missing.append((path, self._deepest))

    def _walked(self, cursor: JSONPath) -> None:
        branch = cursor.current_path()
        if len(branch) > len(self._deepest):
            self._deepest = branch
