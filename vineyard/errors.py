"""Error types raised while configuring a remapping run."""


class VineyardError(Exception):
    """Base class for all Vineyard errors."""


class InvalidConfigurationError(VineyardError, ValueError):
    """Raised when required configuration is missing or invalid.

    These are caller-input errors detected before any engine work starts.
    They are never retried.
    """


class IllegalStateError(VineyardError, RuntimeError):
    """Raised when a single-use builder is used after it was finalized."""
