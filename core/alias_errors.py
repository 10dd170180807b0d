"""Errors raised while validating or storing a new alias."""


class AliasValidationError(ValueError):
    """Base error; ``message`` is shown to the user as-is."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class LocalValidationError(AliasValidationError):
    """A required field was left empty."""


class StoreError(AliasValidationError):
    """The alias store rejected the pair (bad address, duplicate alias, ...)."""
