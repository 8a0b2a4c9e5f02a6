"""Exceptions raised by country lookups."""


class NotFoundError(LookupError):
    """No country matched the given code or name."""

    def __init__(self, value: str, message: str | None = None) -> None:
        self.value = value
        super().__init__(message or f"No country found for {value!r}")
