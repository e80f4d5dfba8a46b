"""
Tabular summary of a packed batch, for display and CSV export.
"""
import pandas as pd

from .models import LineResult

COLUMNS = ['Line', 'Max Weight', 'Items', 'Selected', 'Total Weight', 'Total Price', 'Token']


def results_frame(results: list[LineResult]) -> pd.DataFrame:
    """Build one row per processed line, numbered from 1 in input order."""
    rows = [{
        'Line': number,
        'Max Weight': result.package.maximum_weight,
        'Items': result.package.item_count,
        'Selected': len(result.selected),
        'Total Weight': round(result.total_weight, 2),
        'Total Price': round(result.total_price, 2),
        'Token': result.token,
    } for number, result in enumerate(results, start=1)]
    return pd.DataFrame(rows, columns=COLUMNS)
