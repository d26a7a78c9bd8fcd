"""
Budget profile model.

Profiles are persisted with camelCase keys so stored collections keep the
same record shape across versions.
"""

import uuid
from dataclasses import dataclass, replace
from typing import Any, Optional

from ..utils.numbers import coerce_number

# Storage key for each attribute
FIELD_KEYS = {
    "id": "id",
    "name": "name",
    "income": "income",
    "expenses": "expenses",
    "allocation": "allocation",
    "holdings": "holdings",
    "target": "target",
    "spent_so_far": "spentSoFar",
}

EDITABLE_FIELDS = ("name", "income", "expenses", "allocation", "holdings", "target", "spent_so_far")

NUMERIC_FIELDS = ("income", "expenses", "allocation", "holdings", "target", "spent_so_far")


def new_profile_id() -> str:
    """Generate an opaque unique profile id."""
    return uuid.uuid4().hex


def resolve_field_name(name: str) -> Optional[str]:
    """Map a snake_case or camelCase field name to the attribute name."""
    if name in FIELD_KEYS:
        return name
    for attr, key in FIELD_KEYS.items():
        if key == name:
            return attr
    return None


@dataclass(frozen=True)
class Profile:
    """A named budget profile."""
    id: str
    name: str
    income: float = 0.0             # Monthly net income
    expenses: float = 0.0           # Monthly expenses
    allocation: float = 0.2         # Fraction of surplus to invest, (0, 1]
    holdings: float = 0.0           # Accumulated asset quantity
    target: float = 1.0             # Goal asset quantity
    spent_so_far: float = 0.0       # Spent this budgeting period

    @classmethod
    def new(cls, name: str, **values: Any) -> "Profile":
        """Create a profile with a freshly generated id."""
        return cls(id=new_profile_id(), name=name, **values)

    @classmethod
    def with_defaults(cls, name: str) -> "Profile":
        """Profile added from the profile manager with starter figures."""
        return cls.new(
            name,
            income=5000.0,
            expenses=3000.0,
            allocation=0.2,
            holdings=0.0,
            target=1.0,
            spent_so_far=0.0,
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Profile":
        """
        Build a profile from a stored or form record.

        Numeric fields are coerced the same way the engine reads them: missing
        or invalid values become 0, except target which becomes 1.0.
        """
        def pick(attr: str) -> Any:
            key = FIELD_KEYS[attr]
            return data[key] if key in data else data.get(attr)

        return cls(
            id=str(pick("id")),
            name=str(pick("name") or ""),
            income=coerce_number(pick("income")),
            expenses=coerce_number(pick("expenses")),
            allocation=coerce_number(pick("allocation")),
            holdings=coerce_number(pick("holdings")),
            target=coerce_number(pick("target"), default=1.0),
            spent_so_far=coerce_number(pick("spent_so_far")),
        )

    def to_dict(self) -> dict[str, Any]:
        """Storage record shape."""
        return {key: getattr(self, attr) for attr, key in FIELD_KEYS.items()}

    def updated(self, **changes: Any) -> "Profile":
        """Return a copy with the given attributes replaced."""
        return replace(self, **changes)
