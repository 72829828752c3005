from domain.naming.errors import (
    NAME_PATTERN_ERROR_MESSAGE,
    NUMBER_PLACEHOLDER,
    NamePatternError,
)
from domain.naming.pattern import (
    branch_name_from_ref,
    extract_issue_number,
    matches_name_pattern,
    render_branch_name,
    validate_name_pattern,
)

__all__ = [
    "NAME_PATTERN_ERROR_MESSAGE",
    "NUMBER_PLACEHOLDER",
    "NamePatternError",
    "branch_name_from_ref",
    "extract_issue_number",
    "matches_name_pattern",
    "render_branch_name",
    "validate_name_pattern",
]
