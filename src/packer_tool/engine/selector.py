"""
Item Selector - picks which items of a validated package to ship.

This is a single-pass greedy heuristic, not an optimal 0/1 knapsack:
1. Drop items heavier than the package limit
2. Sort by price descending, lighter first on equal price
3. Take the first item, then any later item that still fits
   (running weight below the limit and the new total within it)

Output tokens depend on this exact order of operations, so it must not
be swapped for an optimal solver.
"""
from .models import Item, Package


def _sort_key(item: Item):
    return (-item.price, item.weight)


def pack_items(package: Package) -> list[Item]:
    """Return the chosen items in the order they were taken."""
    limit = package.maximum_weight
    candidates = sorted(
        (item for item in package.items if item.weight <= limit),
        key=_sort_key
    )

    chosen: list[Item] = []
    running_weight = 0.0
    for item in candidates:
        if not chosen:
            chosen.append(item)
            running_weight = item.weight
        elif running_weight < limit and running_weight + item.weight <= limit:
            chosen.append(item)
            running_weight += item.weight
        # skipped items do not stop the walk

    return chosen
