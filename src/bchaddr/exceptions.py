class InvalidAddressError(ValueError):
    """Input is not a valid Bitcoin Cash address in any supported format."""

    def __init__(
        self, message: str = "Received an invalid Bitcoin Cash address as input."
    ) -> None:
        super().__init__(message)


__all__ = ["InvalidAddressError"]
