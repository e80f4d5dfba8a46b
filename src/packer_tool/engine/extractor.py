"""
Package Extractor - turns a raw package line into a Package.

Any malformed line, whether the shape or a number is wrong,
collapses into one InvalidPackageLine carrying the raw line.
"""
from .grammar import validate_raw_line
from .models import ExtractionResult, Item, Package

SEPARATOR = ' : '
STRIP_CHARS = str.maketrans('', '', '()€')


def _parse_index(value: str):
    number = float(value)
    return int(number) if number.is_integer() else number


def extract_items(raw_items: str) -> list[Item]:
    """
    Parse the item groups of a line.

    ``"(1,53.38,€45) (2,88.62,€98)"`` becomes
    ``[Item(1, 53.38, 45.0), Item(2, 88.62, 98.0)]``.

    Raises ValueError if a group does not hold exactly three numbers.
    """
    items = []
    for group in raw_items.split(' '):
        fields = group.translate(STRIP_CHARS).split(',')
        if len(fields) != 3:
            raise ValueError(f"Expected 3 fields in item group {group!r}, got {len(fields)}")
        index, weight, price = fields
        items.append(Item(index=_parse_index(index), weight=float(weight), price=float(price)))
    return items


def try_extract_package(raw_line: str) -> ExtractionResult:
    """Parse a line without raising; the result says whether it worked."""
    if not validate_raw_line(raw_line):
        return ExtractionResult.failure(raw_line)

    parts = raw_line.split(SEPARATOR)
    if len(parts) != 2:
        return ExtractionResult.failure(raw_line)

    maximum_weight_str, raw_items = parts
    try:
        maximum_weight = float(maximum_weight_str)
        items = extract_items(raw_items)
    except ValueError:
        return ExtractionResult.failure(raw_line)

    return ExtractionResult.success(raw_line, Package(maximum_weight=maximum_weight, items=items))


def extract_package(raw_line: str) -> Package:
    """
    Parse a line into a Package.

    Raises:
        InvalidPackageLine: if the line is malformed in any way
    """
    return try_extract_package(raw_line).unwrap()
