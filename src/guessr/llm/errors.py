"""Exceptions raised while relaying a conversation to a model provider."""


class RelayError(Exception):
    """Base class for failures that end a relay call with an error result."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(RelayError):
    """A required credential or setting is missing at call time."""

    pass


class UpstreamError(RelayError):
    """The provider answered with a non-success status or an error payload."""

    pass


class TransportError(RelayError):
    """The call failed before a usable response was received."""

    pass
