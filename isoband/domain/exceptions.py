"""Domain errors raised before any map mutation happens."""


class InvalidInputError(ValueError):
    """A form value is missing, non-numeric or out of range.

    ``field`` names the offending control: "distance", "time" or "num_bands".
    """

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(message)
