"""Exception types shared by the search core and the puzzle solvers."""


class MalformedInputError(ValueError):
    """Puzzle input could not be parsed.

    The message always names the offending fragment of the input so a bad
    data file can be located quickly.
    """

    def __init__(self, message: str, fragment: str = ""):
        self.fragment = fragment
        if fragment:
            message = f"{message}: {fragment!r}"
        super().__init__(message)


class SearchLimitExceeded(RuntimeError):
    """Search expanded more states than its configured limit."""

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"Search exceeded {limit} expansions")
