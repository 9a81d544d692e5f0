"""
Tests for object tree traversal.
"""

from sdvalidation.core.walker import iter_object, walk_object


def test_walk_visits_pairs_in_preorder():
    """Test depth-first pre-order traversal with paths and containers."""
    inner = {"c": 2}
    tree = {"a": 1, "b": inner, "d": 3}
    visits = []

    walk_object(tree, lambda key, value, path, obj: visits.append((key, value, path, obj)))

    assert visits == [
        ("a", 1, ["a"], tree),
        ("b", inner, ["b"], tree),
        ("c", 2, ["b", "c"], inner),
        ("d", 3, ["d"], tree),
    ]


def test_walk_lists_use_index_keys():
    """Test that list elements are keyed by their index."""
    first = {"x": 1}
    tree = {"items": [first, "plain"]}

    paths = [(key, path) for key, _, path, _ in iter_object(tree)]

    assert paths == [
        ("items", ["items"]),
        ("0", ["items", "0"]),
        ("x", ["items", "0", "x"]),
        ("1", ["items", "1"]),
    ]


def test_walk_enclosing_object_for_nested_pairs():
    """Test that nested pairs report their own container."""
    node = {"@type": "Person", "name": "x"}
    tree = {"items": [node]}

    enclosing = {key: obj for key, _, _, obj in iter_object(tree)}

    assert enclosing["@type"] is node


def test_walk_scalars_and_none():
    """Test that scalars and None produce no visits."""
    assert list(iter_object(None)) == []
    assert list(iter_object("text")) == []
    assert list(iter_object(5)) == []


def test_walk_with_base_path():
    """Test that a base path prefixes every visit."""
    paths = [path for _, _, path, _ in iter_object({"a": 1}, ["root"])]

    assert paths == [["root", "a"]]
