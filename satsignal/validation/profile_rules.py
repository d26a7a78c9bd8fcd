"""Budget profile invariant checks for create and edit commands."""

from typing import Any

from ..config.validation import ValidationError
from ..models.profile import NUMERIC_FIELDS
from ..utils.numbers import parse_number


class ProfileValidator:
    """Validates profile field values against the budget invariants."""

    @staticmethod
    def validate_field(field: str, value: Any) -> list[ValidationError]:
        """Validate a single attribute value."""
        if field == "name":
            if not isinstance(value, str) or not value.strip():
                return [ValidationError(
                    field="name",
                    message="Must be a non-empty string",
                    value=value
                )]
            return []

        if field not in NUMERIC_FIELDS:
            return [ValidationError(
                field=field,
                message="Unknown profile field",
                value=value
            )]

        number = parse_number(value)
        if number is None:
            return [ValidationError(
                field=field,
                message="Must be a finite number",
                value=value
            )]

        if field == "allocation":
            if number <= 0 or number > 1:
                return [ValidationError(
                    field="allocation",
                    message="Must be greater than 0 and at most 1",
                    value=value
                )]
        elif field == "target":
            if number <= 0:
                return [ValidationError(
                    field="target",
                    message="Must be a positive number",
                    value=value
                )]
        elif number < 0:
            return [ValidationError(
                field=field,
                message="Must be a non-negative number",
                value=value
            )]

        return []

    @staticmethod
    def validate_profile(values: dict[str, Any]) -> list[ValidationError]:
        """Validate every attribute present in ``values``."""
        errors = []
        for field, value in values.items():
            if field == "id":
                continue
            errors.extend(ProfileValidator.validate_field(field, value))
        return errors
