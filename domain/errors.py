class ConfigurationError(RuntimeError):
    """Raised when the action inputs or the run environment are unusable."""


class MissingPayloadError(RuntimeError):
    """Raised when the event payload lacks data the event kind promised."""
