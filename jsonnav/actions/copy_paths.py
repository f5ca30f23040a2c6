"""Copy only the navigated branches of a JSON object into a new object."""

import copy
from typing import Any, Dict, List, Mapping, Optional, Sequence

from ..core.action import DefaultNavigateAction
from ..core.navigator import PathNotFoundError
from ..core.path import JSONPath


class _ArrayBranch:
    """An array being rebuilt, keyed by the source index of each element.

    The navigator skips some elements without an event, so a branch can
    hold any subset of the source positions. Keeping the source index lets
    branches of different paths line up when they are merged.
    """

    __slots__ = ('source', 'items', '_scan')

    def __init__(self, source: Sequence):
        self.source = source
        self.items: Dict[int, Any] = {}
        self._scan = 0

    def locate(self, element: Any) -> int:
        """Return the source index of the next occurrence of element."""
        for index in range(self._scan, len(self.source)):
            if self.source[index] is element:
                self._scan = index + 1
                return index
        raise ValueError("element is not part of the source array")


def merge_trees(dest: Any, src: Any) -> Any:
    """Deep-merge src into dest and return the merged value.

    Objects merge key by key, arrays merge element by element (extra
    elements of src are appended), arrays being rebuilt by CopyPathsAction
    merge by source index, anything else is replaced by src.
    """
    if isinstance(dest, dict) and isinstance(src, dict):
        for key, value in src.items():
            dest[key] = merge_trees(dest[key], value) if key in dest else value
        return dest
    if isinstance(dest, list) and isinstance(src, list):
        for index, value in enumerate(src):
            if index < len(dest):
                dest[index] = merge_trees(dest[index], value)
            else:
                dest.append(value)
        return dest
    if isinstance(dest, (list, _ArrayBranch)) and isinstance(src, (list, _ArrayBranch)):
        merged = _as_branch(dest)
        for index, value in _as_branch(src).items.items():
            if index in merged.items:
                merged.items[index] = merge_trees(merged.items[index], value)
            else:
                merged.items[index] = value
        return merged
    return src


def _as_branch(array: Any) -> _ArrayBranch:
    if isinstance(array, _ArrayBranch):
        return array
    branch = _ArrayBranch(array)
    branch.items = dict(enumerate(array))
    return branch


def _finalize(node: Any) -> Any:
    """Turn every _ArrayBranch into a plain list ordered by source index."""
    if isinstance(node, _ArrayBranch):
        return [_finalize(node.items[index]) for index in sorted(node.items)]
    if isinstance(node, dict):
        return {key: _finalize(value) for key, value in node.items()}
    return node


class _Frame:
    """A container on the build stack and the slot it occupies in its parent."""

    __slots__ = ('node', 'parent', 'slot', 'dead')

    def __init__(self, node: Any, parent: Any = None, slot: Any = None):
        self.node = node
        self.parent = parent
        self.slot = slot
        self.dead = False


class CopyPathsAction(DefaultNavigateAction):
    """Builds a copy of the source holding only the navigated paths.

    Objects and arrays along each path are recreated empty and filled as the
    navigator descends. A container reached exactly at the end of a path is
    copied whole. Branches of every path are merged into one result, so
    "a.b" and "a.c" produce {"a": {"b": ..., "c": ...}}. Array elements are
    merged by their position in the source, so paths that reach different
    elements of the same array do not shift each other.

    Example:
        >>> action = CopyPathsAction()
        >>> JSONNavigator(action, ["k1.k2"]).navigate({"k1": {"k2": 1, "x": 2}})
        >>> action.result()
        {'k1': {'k2': 1}}

    With strict=True (the default) a path missing from the source raises
    PathNotFoundError; pair it with a non fail-fast policy to skip such
    paths instead. With strict=False missing branches are dropped: a
    container recreated for a branch that ends early is left out of the
    result when nothing else was copied into it, so copying "k1.k9" from
    {"k1": {"k2": 1}} gives {}. Empty arrays and objects that exist in the
    source are still copied.
    """

    def __init__(self, strict: bool = True, policy=None):
        super().__init__(policy)
        self.strict = strict
        self._dest_tree: Optional[dict] = None
        self._dest_branch: Optional[dict] = None
        self._stack: List[_Frame] = []

    def result(self) -> Optional[dict]:
        """Return the copied tree (None if the source was None)."""
        return _finalize(self._dest_tree)

    def on_navigation_start(self, root: Optional[Mapping], paths: List[str]) -> bool:
        if root is None:
            self._dest_tree = None
            return False
        self._dest_tree = {}
        return True

    def on_next_path(self, path: str) -> bool:
        self._dest_branch = {}
        self._stack = [_Frame(self._dest_branch)]
        return True

    def on_premature_branch_end(self, cursor: JSONPath, node: Any) -> None:
        if self.strict:
            raise PathNotFoundError(cursor.origin(), cursor.current_path())
        self._stack[-1].dead = True

    def on_object_start_and_recur(self, cursor: JSONPath, obj: Mapping) -> bool:
        if not cursor.has_next():
            # Path ends here: the leaf hook copies the whole object
            return False
        self._push(cursor, {}, obj)
        return True

    def on_array_start_and_recur(self, cursor: JSONPath, array: Sequence) -> bool:
        if not cursor.has_next():
            return False
        self._push(cursor, _ArrayBranch(array), array)
        return True

    def on_object_leaf(self, cursor: JSONPath, value: Any) -> None:
        top = self._stack[-1].node if self._stack else None
        if isinstance(top, dict):
            top[cursor.curr()] = copy.deepcopy(value)

    def on_array_leaf(self, index: int, value: Any) -> None:
        top = self._stack[-1].node if self._stack else None
        if isinstance(top, _ArrayBranch):
            top.items[index] = copy.deepcopy(value)

    def on_object_end(self, cursor: JSONPath) -> None:
        self._pop()

    def on_array_end(self, cursor: JSONPath) -> None:
        self._pop()

    def on_path_end(self, path: str) -> None:
        merge_trees(self._dest_tree, self._dest_branch)

    def _push(self, cursor: JSONPath, node: Any, source: Any) -> None:
        top = self._stack[-1].node
        if isinstance(top, dict):
            slot = cursor.curr()
            top[slot] = node
        else:
            slot = top.locate(source)
            top.items[slot] = node
        self._stack.append(_Frame(node, top, slot))

    def _pop(self) -> None:
        # The bottom frame is the path's branch itself and is never popped
        if len(self._stack) < 2:
            return
        frame = self._stack.pop()
        if not frame.dead or _has_content(frame.node):
            return
        if isinstance(frame.parent, dict):
            del frame.parent[frame.slot]
        else:
            del frame.parent.items[frame.slot]
        self._stack[-1].dead = True


def _has_content(node: Any) -> bool:
    if isinstance(node, _ArrayBranch):
        return bool(node.items)
    return bool(node)
