"""Domain exceptions."""


class NotFoundError(LookupError):
    """Raised when a user or catalog entry does not exist."""

    def __init__(self, entity: str, identifier: object) -> None:
        super().__init__(f"{entity} not found: {identifier}")
        self.entity = entity
        self.identifier = identifier


class DuplicateEmailError(ValueError):
    """Raised when registering an email that is already taken."""

    def __init__(self, email: str) -> None:
        super().__init__(f"Email already registered: {email}")
        self.email = email
