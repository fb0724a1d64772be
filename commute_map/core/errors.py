"""Exception hierarchy for commute_map."""


class CommuteMapError(Exception):
    """Base exception for all commute_map errors."""


class InvalidArgumentError(CommuteMapError, ValueError):
    """An argument is outside the range an operation accepts."""


class EmptyInputError(CommuteMapError, ValueError):
    """A non-empty sequence was required."""

    def __init__(self, what: str = "candidates"):
        self.what = what
        super().__init__(f"{what} must not be empty")


class AddressNotFound(CommuteMapError):
    """A geocoding collaborator returned no place."""

    def __init__(self, query: str):
        self.query = query
        super().__init__(f"No place found for '{query}'")
