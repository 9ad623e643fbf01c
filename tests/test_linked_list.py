import pytest

from algokit.linked_list import LinkedList, ListNode, has_cycle, remove_cycle

EIGHT = list(range(1, 9))


def test_build_and_iterate():
    assert list(LinkedList(EIGHT)) == EIGHT
    assert len(LinkedList(EIGHT)) == len(EIGHT)
    assert list(LinkedList()) == []
    assert len(LinkedList()) == 0


def test_str_format():
    assert str(LinkedList([1, 2, 3])) == "1->2->3->NULL"
    assert str(LinkedList()) == "NULL"


def test_append_and_prepend():
    items = LinkedList()
    items.append(1)
    items.append(2)
    items.append(3)
    items.prepend(6)
    assert list(items) == [6, 1, 2, 3]


def test_contains():
    items = LinkedList([6, 1, 2, 3])
    assert 2 in items
    assert 5 not in items


def test_pop_front():
    items = LinkedList([4, 5])
    assert items.pop_front() == 4
    assert list(items) == [5]
    assert items.pop_front() == 5
    with pytest.raises(IndexError):
        items.pop_front()


def test_remove_middle_head_and_missing():
    items = LinkedList([6, 1, 2, 3])
    items.remove(2)
    assert list(items) == [6, 1, 3]
    items.remove(6)
    assert list(items) == [1, 3]
    with pytest.raises(ValueError):
        items.remove(42)
    with pytest.raises(ValueError):
        LinkedList().remove(1)


def test_reverse_variants():
    for method in ("reverse", "reverse_recursive"):
        items = LinkedList(EIGHT)
        getattr(items, method)()
        assert list(items) == list(reversed(EIGHT))
        getattr(items, method)()
        assert list(items) == EIGHT


def test_reverse_empty_and_single():
    empty = LinkedList()
    empty.reverse()
    assert list(empty) == []
    single = LinkedList([9])
    single.reverse_recursive()
    assert list(single) == [9]


def test_reverse_in_pairs():
    items = LinkedList(EIGHT)
    items.reverse_in_groups(2)
    assert list(items) == [2, 1, 4, 3, 6, 5, 8, 7]


def test_reverse_in_groups_invariants():
    whole = LinkedList(EIGHT)
    whole.reverse_in_groups(len(EIGHT) + 3)
    assert list(whole) == list(reversed(EIGHT))
    same = LinkedList(EIGHT)
    same.reverse_in_groups(1)
    assert list(same) == EIGHT
    twice = LinkedList(EIGHT)
    twice.reverse_in_groups(3)
    assert sorted(twice) == EIGHT
    twice.reverse_in_groups(3)
    assert list(twice) == EIGHT


def test_reverse_in_groups_rejects_zero():
    with pytest.raises(ValueError):
        LinkedList(EIGHT).reverse_in_groups(0)


def test_rotate_example():
    items = LinkedList(EIGHT)
    items.rotate(3)
    assert list(items) == [6, 7, 8, 1, 2, 3, 4, 5]


def test_rotate_invariants():
    full = LinkedList(EIGHT)
    full.rotate(len(EIGHT))
    assert list(full) == EIGHT
    zero = LinkedList(EIGHT)
    zero.rotate(0)
    assert list(zero) == EIGHT
    back = LinkedList(EIGHT)
    back.rotate(3)
    back.rotate(len(EIGHT) - 3)
    assert list(back) == EIGHT
    empty = LinkedList()
    empty.rotate(4)
    assert list(empty) == []


def _chain(values):
    nodes = [ListNode(value) for value in values]
    for current, following in zip(nodes, nodes[1:]):
        current.next = following
    return nodes


def test_detect_no_cycle():
    nodes = _chain(EIGHT)
    assert has_cycle(nodes[0]) is False
    assert remove_cycle(nodes[0]) is False
    assert has_cycle(None) is False


@pytest.mark.parametrize("loop_start", [0, 1, 3, 7])
def test_detect_and_remove_cycle(loop_start):
    nodes = _chain(EIGHT)
    nodes[-1].next = nodes[loop_start]
    assert has_cycle(nodes[0]) is True
    assert remove_cycle(nodes[0]) is True
    assert has_cycle(nodes[0]) is False
    items = LinkedList()
    items.head = nodes[0]
    assert list(items) == EIGHT