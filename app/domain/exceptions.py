"""Domain exceptions."""


class ConfigurationError(ValueError):
    """A required credential or identifier is not configured."""


class WebhookStructureError(ValueError):
    """The webhook envelope is missing entry, changes or value."""


class MessageExtractionError(ValueError):
    """A single message could not be normalized."""
