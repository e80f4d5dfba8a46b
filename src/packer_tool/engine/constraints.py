"""
Constraint Validator - checks a parsed package against the configured limits.
"""
from typing import Optional

from ..config.settings import Constraints, get_settings
from .models import Package, ValidationResult


def validate_packaging_constraints(
    package: Package,
    constraints: Optional[Constraints] = None
) -> ValidationResult:
    """
    Evaluate all four constraints and report each one.

    Never raises; the caller decides what an invalid package means.
    """
    limits = constraints or get_settings().constraints

    # price per item
    max_price_item_is_valid = all(item.price <= limits.max_price_item for item in package.items)

    # weight per item
    max_weight_per_item_is_valid = all(item.weight <= limits.max_weight_item for item in package.items)

    # weight the package may carry
    max_weight_per_package_is_valid = package.maximum_weight <= limits.max_weight_total

    # number of candidate items
    items_count_is_valid = len(package.items) <= limits.max_item_count

    return ValidationResult(
        is_valid=(
            max_price_item_is_valid
            and max_weight_per_item_is_valid
            and max_weight_per_package_is_valid
            and items_count_is_valid
        ),
        max_price_item_is_valid=max_price_item_is_valid,
        max_weight_per_item_is_valid=max_weight_per_item_is_valid,
        max_weight_per_package_is_valid=max_weight_per_package_is_valid,
        items_count_is_valid=items_count_is_valid,
    )
