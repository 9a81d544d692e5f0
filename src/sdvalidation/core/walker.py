"""
Depth-first traversal of JSON-like object trees.

The walker visits every key/value pair of nested mappings and lists in
pre-order, reporting the path from the root and the container holding the
pair. List elements are keyed by their index rendered as a string, so paths
are always sequences of strings.
"""

from typing import Any, Callable, Iterator, List, Optional, Tuple

Visitor = Callable[[str, Any, List[str], Any], None]
Visit = Tuple[str, Any, List[str], Any]


def _children(obj: Any) -> Iterator[Tuple[str, Any]]:
    if isinstance(obj, dict):
        yield from ((str(key), value) for key, value in obj.items())
    elif isinstance(obj, (list, tuple)):
        yield from ((str(index), value) for index, value in enumerate(obj))


def iter_object(obj: Any, path: Optional[List[str]] = None) -> Iterator[Visit]:
    """
    Yield ``(key, value, path, enclosing)`` for every pair in an object tree.

    Pairs are yielded in insertion order, each before the pairs nested
    inside its value. ``path`` includes the current key.

    Args:
        obj: Root mapping or list; scalars and None yield nothing
        path: Path of ``obj`` itself, empty for the root

    Example:
        >>> [(k, p) for k, _, p, _ in iter_object({"a": {"b": 1}})]
        [('a', ['a']), ('b', ['a', 'b'])]
    """
    for key, value in _children(obj):
        current = (path or []) + [key]
        yield key, value, current, obj
        if isinstance(value, (dict, list, tuple)):
            yield from iter_object(value, current)


def walk_object(obj: Any, callback: Visitor, path: Optional[List[str]] = None) -> None:
    """
    Invoke ``callback(key, value, path, enclosing)`` for every pair in an object tree.

    Args:
        obj: Root mapping or list
        callback: Visitor called once per pair, in depth-first pre-order
        path: Path of ``obj`` itself, empty for the root
    """
    for key, value, current, enclosing in iter_object(obj, path):
        callback(key, value, current, enclosing)
