"""
Data models for the packing engine.

Uses dataclasses for structured, type-safe data representation.
"""
from dataclasses import dataclass, field
from typing import Optional, Union

from .errors import InvalidPackageLine


@dataclass
class TraceStep:
    """A single step in the line processing trace."""
    step: str
    description: str
    value: Optional[str] = None


@dataclass(frozen=True)
class Item:
    """A candidate item: its 1-based index in the line, weight and price."""
    index: Union[int, float]
    weight: float
    price: float


@dataclass
class Package:
    """One line's weight limit and candidate items, in textual order."""
    maximum_weight: float
    items: list[Item] = field(default_factory=list)

    @property
    def item_count(self) -> int:
        return len(self.items)


def total_weight(items: list[Item]) -> float:
    return sum(item.weight for item in items)


def total_price(items: list[Item]) -> float:
    return sum(item.price for item in items)


@dataclass
class ValidationResult:
    """Outcome of checking a package against the four constraints."""
    is_valid: bool
    max_price_item_is_valid: bool
    max_weight_per_item_is_valid: bool
    max_weight_per_package_is_valid: bool
    items_count_is_valid: bool

    def failed_constraints(self) -> list[str]:
        """Names of the constraints that did not hold."""
        checks = [
            ('max_price_item', self.max_price_item_is_valid),
            ('max_weight_item', self.max_weight_per_item_is_valid),
            ('max_weight_total', self.max_weight_per_package_is_valid),
            ('max_item_count', self.items_count_is_valid),
        ]
        return [name for name, ok in checks if not ok]


@dataclass
class ExtractionResult:
    """
    Either a parsed package or the raw line that failed to parse.

    Build with ``success()`` / ``failure()``; ``unwrap()`` returns the
    package or raises the carried error.
    """
    raw_line: str
    package: Optional[Package] = None
    error: Optional[InvalidPackageLine] = None

    @classmethod
    def success(cls, raw_line: str, package: Package) -> 'ExtractionResult':
        return cls(raw_line=raw_line, package=package)

    @classmethod
    def failure(cls, raw_line: str) -> 'ExtractionResult':
        return cls(raw_line=raw_line, error=InvalidPackageLine(raw_line))

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Package:
        if self.error is not None:
            raise self.error
        return self.package


@dataclass
class LineResult:
    """Complete result of processing one package line."""
    raw_line: str
    package: Package
    validation: ValidationResult
    selected: list[Item] = field(default_factory=list)
    token: str = '-'
    trace: list[TraceStep] = field(default_factory=list)

    @property
    def total_weight(self) -> float:
        return total_weight(self.selected)

    @property
    def total_price(self) -> float:
        return total_price(self.selected)

    def add_trace(self, step: str, description: str, value: str = None):
        """Add a step to the trace for this line."""
        self.trace.append(TraceStep(step=step, description=description, value=value))

    def get_trace_text(self) -> str:
        """Get human-readable trace as formatted text."""
        lines = []
        for t in self.trace:
            if t.value:
                lines.append(f"→ {t.step}: {t.description} = {t.value}")
            else:
                lines.append(f"→ {t.step}: {t.description}")
        return "\n".join(lines)
