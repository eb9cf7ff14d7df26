import pytest

from npuzzle.node import Node


def test_state_is_stored_as_tuple():
    node = Node([1, 2, 0, 3])
    assert node.state == (1, 2, 0, 3)


def test_default_costs_are_zero():
    node = Node((1, 0, 2, 3))
    assert node.g_cost == 0.0
    assert node.h_cost == 0.0
    assert node.parent is None


@pytest.mark.parametrize("g, h", [(0.0, 0.0), (2.0, 3.0), (7.0, 0.5)])
def test_f_cost_is_sum_of_costs(g, h):
    node = Node((1, 2, 3, 0), g, h)
    assert node.f_cost == node.g_cost + node.h_cost
    assert node.f_cost >= max(g, h)


def test_equality_ignores_costs_and_parent():
    root = Node((0, 1, 2, 3))
    a = Node((1, 0, 2, 3), 1.0, 4.0, root)
    b = Node((1, 0, 2, 3), 9.0, 0.0, None)
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_different_states_are_not_equal():
    assert not (Node((1, 0, 2, 3)) == Node((0, 1, 2, 3)))


def test_path_from_root():
    root = Node((0, 1, 2, 3))
    child = Node((1, 0, 2, 3), 1.0, 0.0, root)
    grandchild = Node((1, 3, 2, 0), 2.0, 0.0, child)
    assert grandchild.path() == [root.state, child.state, grandchild.state]


def test_path_of_root_is_itself():
    root = Node((0, 1, 2, 3))
    assert root.path() == [(0, 1, 2, 3)]


def test_node_is_immutable():
    node = Node((0, 1, 2, 3), 1.0, 2.0)
    with pytest.raises(AttributeError):
        node.g_cost = 5.0
    assert node.g_cost == 1.0
    assert node.f_cost == 3.0