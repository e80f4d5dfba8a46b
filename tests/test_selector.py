"""
Greedy item selection.
"""
import pytest
import sys
import os

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from packer_tool.engine import Item, Package
from packer_tool.engine.selector import pack_items


@pytest.fixture
def tie_package():
    """Two items share the top price; the lighter one must lead."""
    return Package(maximum_weight=75, items=[
        Item(index=1, price=45, weight=53.38),
        Item(index=2, price=74, weight=60.02),
        Item(index=3, price=3, weight=88.48),
        Item(index=4, price=26, weight=72.30),
        Item(index=5, price=9, weight=30.18),
        Item(index=6, price=74, weight=14.55),
    ])


def test_pack_items():
    package = Package(maximum_weight=81, items=[
        Item(index=1, price=45, weight=53.38),
        Item(index=2, price=98, weight=88.62),
        Item(index=3, price=3, weight=78.48),
        Item(index=4, price=76, weight=72.30),
        Item(index=5, price=9, weight=30.18),
        Item(index=6, price=48, weight=46.34),
    ])
    assert pack_items(package) == [Item(index=4, price=76, weight=72.30)]


def test_equal_price_both_fit_lighter_first(tie_package):
    assert pack_items(tie_package) == [
        Item(index=6, price=74, weight=14.55),
        Item(index=2, price=74, weight=60.02),
    ]


def test_equal_price_only_one_fits_lighter_wins():
    package = Package(maximum_weight=10, items=[
        Item(index=1, price=50, weight=8),
        Item(index=2, price=50, weight=6),
    ])
    assert [item.index for item in pack_items(package)] == [2]


def test_item_heavier_than_limit_never_selected(tie_package):
    assert Item(index=3, price=3, weight=88.48) not in pack_items(tie_package)


def test_expensive_item_heavier_than_limit_is_skipped():
    package = Package(maximum_weight=8, items=[Item(index=1, price=34, weight=15.3)])
    assert pack_items(package) == []


def test_empty_package_selects_nothing():
    assert pack_items(Package(maximum_weight=50, items=[])) == []


def test_weight_equal_to_limit_is_selected():
    package = Package(maximum_weight=12.5, items=[Item(index=1, price=1, weight=12.5)])
    assert pack_items(package) == [Item(index=1, price=1, weight=12.5)]


def test_greedy_is_not_optimal():
    """Price-first greedy keeps the single best item over a better pair."""
    package = Package(maximum_weight=10, items=[
        Item(index=1, price=60, weight=6),
        Item(index=2, price=50, weight=5),
        Item(index=3, price=50, weight=5),
    ])
    assert [item.index for item in pack_items(package)] == [1]


@pytest.mark.parametrize("limit", [5, 17.5, 33, 60, 100])
def test_selection_respects_weight_limit(limit):
    items = [Item(index=i + 1, price=(i * 37) % 100, weight=(i * 13) % 40 + 0.5) for i in range(15)]
    selected = pack_items(Package(maximum_weight=limit, items=items))
    assert sum(item.weight for item in selected) <= limit
    assert all(item.weight <= limit for item in selected)
    assert len({item.index for item in selected}) == len(selected)
