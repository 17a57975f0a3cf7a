from datamuse_mcp.errors import InvalidPatternError

ANY_CHARACTERS = "*"
SINGLE_CHARACTER = "?"

# Longer than any word Datamuse knows.
MAX_NUMBER_MISSING = 64


def build_pattern(start: str = "", end: str = "", number_missing: int | None = None) -> str:
    """Build a spelled-like pattern from the letters a word starts and ends with.

    Without a `number_missing` the gap between the letters is a wildcard of any length. With one, the gap is exactly
    that many unknown characters, so the pattern only matches words of a fixed length.

    Args:
        start: The letter(s) the word starts with.
        end: The letter(s) the word ends with.
        number_missing: The number of unknown characters between `start` and `end`.

    Returns:
        The pattern, e.g. `b*d` or `b??d`.
    """
    if number_missing is None:
        return f"{start}{ANY_CHARACTERS}{end}"

    if not 0 <= number_missing <= MAX_NUMBER_MISSING:
        raise InvalidPatternError(number_missing, maximum=MAX_NUMBER_MISSING)

    return f"{start}{SINGLE_CHARACTER * number_missing}{end}"
