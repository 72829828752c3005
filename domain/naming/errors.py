from domain.errors import ConfigurationError


NUMBER_PLACEHOLDER = "{number}"
NAME_PATTERN_ERROR_MESSAGE = (
    f'Please use a name pattern with "{NUMBER_PLACEHOLDER}" included, '
    f'e.g. "issue-{NUMBER_PLACEHOLDER}"'
)


class NamePatternError(ConfigurationError):
    """Raised when a name pattern does not carry the number placeholder."""
