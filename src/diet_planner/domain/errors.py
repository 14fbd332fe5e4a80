"""Errors raised while generating a diet plan."""


class DietPlanError(Exception):
    """Base error for diet plan generation."""


class MissingFieldsError(DietPlanError):
    """Raised when required form fields are blank."""

    def __init__(self, missing_fields: list[str]) -> None:
        self.missing_fields = missing_fields
        super().__init__(f"Missing required fields: {', '.join(missing_fields)}")


class AssetLoadError(DietPlanError):
    """Raised when a brand image cannot be read or decoded."""
