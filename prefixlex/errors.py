class TokenizeError(Exception):
    """Base class for fatal tokenize failures."""

    def __init__(self, message: str, fragment: str, location: int) -> None:
        super().__init__(message)
        self.message = message
        self.fragment = fragment
        self.location = location


class IntegerOverflow(TokenizeError):
    """A digit-only fragment does not fit in a signed 32-bit integer."""

    def __init__(self, fragment: str, location: int) -> None:
        super().__init__("integer literal out of range", fragment, location)


class EmptyLiteral(TokenizeError):
    """An empty fragment, produced by empty input or by adjacent spaces."""

    def __init__(self, location: int) -> None:
        super().__init__("empty token", "", location)
