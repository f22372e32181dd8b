"""Base configuration class with strict validation.

All config classes inherit from StrictBaseModel so that a typo in a YAML key
fails loudly instead of silently falling back to a default.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class StrictBaseModel(BaseModel):
    """Base model that rejects unknown fields.

    Example:
        class BudgetConfig(StrictBaseModel):
            max_iterations: int

        BudgetConfig(max_iterations=100)  # OK
        BudgetConfig(max_iteration=100)  # ValidationError: extra field 'max_iteration'
    """

    model_config = ConfigDict(
        extra="forbid",
        validate_default=True,
        str_strip_whitespace=True,
    )
