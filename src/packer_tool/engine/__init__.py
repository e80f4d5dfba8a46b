"""Engine subpackage - core packing logic and line processing."""
from .packing_engine import PackingEngine, format_token, process_line, split_lines
from .models import Item, Package, ValidationResult, LineResult
from .errors import PackingError, InvalidPackageLine

__all__ = [
    'PackingEngine', 'format_token', 'process_line', 'split_lines',
    'Item', 'Package', 'ValidationResult', 'LineResult',
    'PackingError', 'InvalidPackageLine',
]
