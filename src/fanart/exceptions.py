class FanartError(Exception):
    """Base exception for all fanart client errors.

    Lookup outcomes are reported as LookupResult values, so these are
    only raised for misuse or misconfiguration.
    """
    pass


class ConfigurationError(FanartError):
    """Raised when a required setting is missing or invalid.

    For example, a key server provider built without a server URL
    or without the key used to authenticate against it.
    """
    pass


class UnknownSecretError(FanartError):
    """Raised when a secret name has no route on the key server."""
    pass
