"""Base Pydantic model with strict defaults for thermvisc configs.

All config schemas inherit from this base so parameter, user, CLI and
internal configs validate the same way.
"""

from pydantic import BaseModel, ConfigDict


class ThermviscBaseModel(BaseModel):
    """Base model for all thermvisc configuration schemas.

    Enforces strict validation:
    - No extra fields allowed
    - Validates assignments after initialization
    - Strips whitespace from strings
    - Rejects inf and nan floats
    """

    model_config = ConfigDict(
        extra='forbid',           # Reject unknown fields
        validate_assignment=True, # Validate on field mutation
        use_enum_values=True,     # Convert enums to values
        str_strip_whitespace=True,# Strip whitespace from strings
        allow_inf_nan=False,      # Reject inf and nan floats
    )
