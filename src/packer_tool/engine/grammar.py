"""
Line grammar check, run before any number in a line is parsed.

A valid line looks like ``81 : (1,53.38,€45) (2,88.62,€98)``.
"""
import re

NUMBER = r'\d+(?:\.\d+)?'
ITEM_GROUP = rf'\({NUMBER},{NUMBER},€{NUMBER}\)'
LINE_PATTERN = re.compile(rf'{NUMBER} : {ITEM_GROUP}(?: {ITEM_GROUP})*', re.ASCII)


def validate_raw_line(line: str) -> bool:
    """Return True if the line has the ``<limit> : (<i>,<w>,€<p>) ...`` shape."""
    if not isinstance(line, str):
        return False
    return LINE_PATTERN.fullmatch(line) is not None
