from __future__ import annotations

from types import SimpleNamespace

import pytest

from utils.ordered_map import OrderedMap


def _item(key, label=""):
    return SimpleNamespace(id=key, label=label)


@pytest.fixture
def omap():
    return OrderedMap(lambda v: v.id)


def test_add_value_keeps_insertion_order(omap):
    for key in (3, 1, 2):
        omap.add_value(_item(key))
    assert omap.keys == [3, 1, 2]
    assert [v.id for v in omap.values] == [3, 1, 2]
    assert len(omap) == 3


def test_duplicate_key_rejected(omap):
    omap.add_value(_item(1))
    with pytest.raises(KeyError):
        omap.add_value(_item(1, "again"))
    assert len(omap) == 1


def test_get_missing_returns_none(omap):
    assert omap.get(42) is None
    assert not omap.has(42)
    assert 42 not in omap


def test_remove_missing_is_noop(omap):
    omap.add_value(_item(1))
    omap.remove(99)
    omap.remove(1)
    omap.remove(1)
    assert omap.keys == []


def test_remove_does_not_reorder(omap):
    for key in range(5):
        omap.add_value(_item(key))
    omap.remove(2)
    omap.add_value(_item(2))
    assert omap.keys == [0, 1, 3, 4, 2]


def test_keys_are_snapshots(omap):
    omap.add_value(_item(1))
    keys = omap.keys
    omap.add_value(_item(2))
    assert keys == [1]


def test_remove_all_and_iteration(omap):
    omap.add(10, _item(10, "a"))
    omap.add(20, _item(20, "b"))
    assert [v.label for v in omap] == ["a", "b"]
    omap.remove_all()
    assert len(omap) == 0
    assert list(omap) == []
