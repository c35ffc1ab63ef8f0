"""Exceptions raised by the FARS toolkit."""


class InvalidStateError(ValueError):
    """
    Raised when a requested STATE code does not occur in a year's data.

    Attributes:
        state: The (integer-coerced) state code that was requested.
    """

    def __init__(self, state: int) -> None:
        self.state = state
        super().__init__(f"invalid STATE number: {state}")
