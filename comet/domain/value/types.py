"""Domain value objects for comment areas.

Value objects are immutable and defined by their values, not identity.
"""

from pydantic import ValidationError as PydanticValidationError
from pydantic import field_validator

from comet.domain.error import ValidationError
from comet.domain.value.common import RootValueObject, ValueObject


class AreaKey(RootValueObject[str]):
    """Externally chosen, stable identifier of a comment area.

    Site operators pick the key when embedding an area (e.g. a page slug or
    URL path). It is unique across areas and never changes.
    """

    @field_validator("root")
    @classmethod
    def validate_area_key(cls, v: str) -> str:
        """Validate key is not blank and within length limits."""
        if not v.strip():
            raise ValueError("Area key must not be blank")
        if len(v) > 255:
            raise ValueError("Area key must be 1-255 characters")
        return v

    @classmethod
    def parse(cls, raw: str) -> "AreaKey":
        """Build a key from request input.

        Raises:
            ValidationError: If the key is blank or too long
        """
        try:
            return cls(raw)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid area key: {raw!r}") from e


class Caller(ValueObject):
    """Identity of whoever invokes a core operation.

    Authentication happens outside the core; only the resulting admin flag
    is passed in.
    """

    is_admin: bool = False

    @classmethod
    def anonymous(cls) -> "Caller":
        """Visitor without admin rights."""
        return cls(is_admin=False)

    @classmethod
    def admin(cls) -> "Caller":
        """The single administrator account."""
        return cls(is_admin=True)
