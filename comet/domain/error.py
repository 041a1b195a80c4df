"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """A required field is missing or empty."""

    pass


class NotFoundError(DomainError):
    """Raised when the target of an operation does not exist."""

    def __init__(self, resource: str, identifier: str | int):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when a uniqueness constraint is violated."""

    def __init__(self, resource: str, identifier: str | int):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} already exists: {identifier}")


class UnauthorizedError(DomainError):
    """Raised when an admin-only operation is attempted without admin identity."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Admin identity required to {action}")


class AreaHiddenError(DomainError):
    """Raised when a visitor addresses a hidden comment area."""

    def __init__(self, area_key: str):
        self.area_key = area_key
        super().__init__(f"Comment area is not available: {area_key}")


class HumanVerificationError(DomainError):
    """Raised when the CAPTCHA gate rejects a comment submission."""

    def __init__(self):
        super().__init__("Human verification failed")
