"""
Component base class for data records.

Components are data containers validated by Pydantic. They may carry
small self-contained mutations (taking damage, gaining experience) but
never reach into other components; orchestration lives in managers.

Usage:
    class Health(Component):
        current: int
        max_hp: int
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict


class Component(BaseModel):
    """
    Base class for all mutable data records.

    Pydantic gives us:
    - Automatic validation (on construction and assignment)
    - JSON-ready serialization via aliases
    - Type hints
    - Default values
    """

    model_config = ConfigDict(
        # Validate on assignment
        validate_assignment=True,
        # Accept both attribute names and persisted (camelCase) aliases
        populate_by_name=True,
        extra='forbid',
    )

    # Class variable: component type name (used in logs and snapshots)
    _type_name: ClassVar[str] = ""

    @classmethod
    def get_type_name(cls) -> str:
        """Get the component type name."""
        return cls._type_name or cls.__name__

    def clone(self) -> Component:
        """Create a deep copy of this component."""
        return self.model_copy(deep=True)


class FrozenComponent(BaseModel):
    """Immutable value record (catalog entries, generated problems)."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra='forbid',
    )
