"""
Tests for the Dependency Resolver.
"""
from mockgen.generation_plan.dependency_resolver import topological_sort


def test_parent_before_child():
    """Referenced tables come before the tables that reference them."""
    order = topological_sort({"posts": ["users"], "users": []})

    assert order == ["users", "posts"], "Parent must come before child"


def test_independent_tables_keep_input_order():
    order = topological_sort({"b": [], "a": [], "c": []})

    assert order == ["b", "a", "c"]


def test_chain():
    order = topological_sort({
        "comments": ["posts", "users"],
        "posts": ["users"],
        "users": [],
    })

    assert order.index("users") < order.index("posts") < order.index("comments")


def test_cycle_terminates_with_each_table_once():
    """A two-table cycle is broken instead of looping."""
    order = topological_sort({"a": ["b"], "b": ["a"]})

    assert sorted(order) == ["a", "b"]
    assert len(order) == 2
    # The first edge visited wins
    assert order == ["b", "a"]


def test_self_reference():
    order = topological_sort({"employees": ["employees"]})

    assert order == ["employees"]


def test_dependency_not_listed_as_key_is_still_emitted():
    order = topological_sort({"posts": ["users"]})

    assert order == ["users", "posts"]


def test_empty():
    assert topological_sort({}) == []


def test_deep_chain_beyond_recursion_limit():
    """A 5000-table foreign key chain is ordered without recursion."""
    depth = 5000
    dependencies = {f"t{i}": [f"t{i + 1}"] for i in range(depth)}
    dependencies[f"t{depth}"] = []

    order = topological_sort(dependencies)

    assert order == [f"t{i}" for i in range(depth, -1, -1)]


def test_cycle_inside_longer_chain():
    order = topological_sort({"a": ["b"], "b": ["c"], "c": ["a", "d"], "d": []})

    assert order == ["d", "c", "b", "a"]
