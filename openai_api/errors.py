"""
Exception hierarchy for openai-api.

Remote and transport failures are returned as Error results, never raised.
These exceptions cover local faults only.
"""


class OpenAIAPIError(Exception):
    pass


class ConfigError(OpenAIAPIError):
    """Config file could not be parsed or validated."""
    pass


class ResultError(OpenAIAPIError):
    """Raised by Result.unwrap() on an Error result."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"API call failed: {value!r}")
