"""
fanart-client - A Python library to fetch artist artwork from fanart.tv.
"""

from fanart.artwork import ArtworkLookupClient
from fanart.client import FanartClient
from fanart.exceptions import ConfigurationError, FanartError, UnknownSecretError
from fanart.models import ArtistImages, LookupResult, ResultStatus
from fanart.secrets import EnvSecretProvider, KeyServerSecretProvider, SecretProvider

__all__ = [
    "FanartClient",
    "ArtworkLookupClient",
    "ArtistImages",
    "LookupResult",
    "ResultStatus",
    "SecretProvider",
    "EnvSecretProvider",
    "KeyServerSecretProvider",
    "FanartError",
    "ConfigurationError",
    "UnknownSecretError",
]
