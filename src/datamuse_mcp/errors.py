class DatamuseError(Exception):
    """A base exception for the Datamuse client."""

    msg: str

    def __init__(self, msg: str):
        self.msg = msg
        super().__init__(msg)

    def __str__(self) -> str:
        return self.msg


class InvalidMaxResultsError(DatamuseError, ValueError):
    """An exception for when the maximum result count is not an integer in the range the service accepts."""

    def __init__(self, max_results: object, minimum: int, maximum: int):
        self.max_results = max_results
        super().__init__(f"max_results must be an integer between {minimum} and {maximum}, got {max_results!r}")


class InvalidPatternError(DatamuseError, ValueError):
    """An exception for when a letter pattern cannot be built from the supplied arguments."""

    def __init__(self, number_missing: int, maximum: int):
        self.number_missing = number_missing
        super().__init__(f"number_missing must be between 0 and {maximum}, got {number_missing}")


class DatamuseTransportError(DatamuseError):
    """An exception for when the service could not be reached or did not answer successfully."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Error fetching {url}: {reason}")
