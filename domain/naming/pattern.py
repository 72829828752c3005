from functools import reduce

from domain.naming.errors import (
    NAME_PATTERN_ERROR_MESSAGE,
    NUMBER_PLACEHOLDER,
    NamePatternError,
)


def validate_name_pattern(pattern: str) -> str:
    if NUMBER_PLACEHOLDER not in pattern:
        raise NamePatternError(NAME_PATTERN_ERROR_MESSAGE)
    return pattern


def render_branch_name(pattern: str, number: int) -> str:
    # Only the first placeholder is substituted.
    return pattern.replace(NUMBER_PLACEHOLDER, str(number), 1)


def _strip_pattern_fragments(candidate: str, pattern: str) -> str:
    fragments = pattern.split(NUMBER_PLACEHOLDER)
    return reduce(
        lambda remainder, fragment: remainder.replace(fragment, "", 1),
        fragments,
        candidate,
    )


def extract_issue_number(candidate: str, pattern: str) -> int | None:
    """Return the number embedded in ``candidate`` or ``None`` when it does not match.

    Each literal fragment of ``pattern`` is removed once, left to right, and
    whatever is left has to be a plain run of ASCII digits.
    """
    remainder = _strip_pattern_fragments(candidate, pattern)
    if not remainder or not remainder.isascii() or not remainder.isdigit():
        return None
    return int(remainder)


def matches_name_pattern(candidate: str, pattern: str) -> bool:
    return extract_issue_number(candidate, pattern) is not None


def branch_name_from_ref(ref: str) -> str:
    return ref.split("/")[-1]
