"""
Centralized settings, constraint limits and path configuration for the packer.
"""
import os
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional


def get_project_root() -> Path:
    """Get the project root directory (where resources/ lives)."""
    # Walk up from this file to find the project root
    current = Path(__file__).resolve()
    for parent in current.parents:
        if (parent / 'resources').is_dir() or (parent / 'pyproject.toml').exists():
            return parent
    # Fallback to 3 levels up from this file
    return Path(__file__).resolve().parent.parent.parent.parent


@dataclass(frozen=True)
class Constraints:
    """Domain limits every package must respect before items are selected."""
    max_price_item: float = 100
    max_weight_item: float = 100
    max_weight_total: float = 100
    max_item_count: int = 15


def _env_number(name: str, default, cast=float):
    """Read a numeric override from the environment."""
    raw = os.environ.get(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return cast(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


@dataclass
class Settings:
    """Application settings with sensible defaults."""

    # Project paths
    project_root: Path
    example_input: Path

    # Packing limits
    constraints: Constraints = field(default_factory=Constraints)

    # Batch execution
    workers: int = 1
    log_level: str = 'INFO'

    @classmethod
    def load(cls, project_root: Optional[Path] = None) -> 'Settings':
        """Load settings from the project structure and environment."""
        root = project_root or get_project_root()
        defaults = Constraints()

        constraints = Constraints(
            max_price_item=_env_number('PACKER_MAX_PRICE_ITEM', defaults.max_price_item),
            max_weight_item=_env_number('PACKER_MAX_WEIGHT_ITEM', defaults.max_weight_item),
            max_weight_total=_env_number('PACKER_MAX_WEIGHT_TOTAL', defaults.max_weight_total),
            max_item_count=_env_number('PACKER_MAX_ITEM_COUNT', defaults.max_item_count, int),
        )

        return cls(
            project_root=root,
            example_input=root / 'resources' / 'example_input',
            constraints=constraints,
            workers=max(1, _env_number('PACKER_WORKERS', 1, int)),
            log_level=os.environ.get('PACKER_LOG_LEVEL', 'INFO').upper(),
        )


# Default settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def reset_settings():
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
