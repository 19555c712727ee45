"""Base entity class for all domain entities."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class BaseEntity:
    """Base class for all entities. Entities are immutable once built."""

    def to_dict(self) -> dict[str, Any]:
        """Convert entity (and nested entities) to a dictionary."""
        return asdict(self)
