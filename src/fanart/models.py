from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypedDict, TypeVar

T = TypeVar("T")


class FanartImage(TypedDict, total=False):
    """Represents a single artwork entry as returned by fanart.tv."""

    url: str
    likes: str  # Returned as a string by the API, unused here


class FanartArtistResponse(TypedDict, total=False):
    """Represents the music artist payload returned by fanart.tv."""

    artistbackground: list[FanartImage]
    hdmusiclogo: list[FanartImage]
    musiclogo: list[FanartImage]
    musicbanner: list[FanartImage]
    artistthumb: list[FanartImage]


@dataclass(frozen=True)
class ArtistImages:
    """Represents the artwork chosen for an artist."""

    background_url: str | None = None
    logo_url: str | None = None
    banner_url: str | None = None
    thumb_url: str | None = None

    @property
    def is_empty(self) -> bool:
        return (
            self.background_url is None
            and self.logo_url is None
            and self.banner_url is None
            and self.thumb_url is None
        )


class ResultStatus(Enum):
    """Possible outcomes of a lookup."""

    SUCCESS = "success"
    SUCCESS_NOT_FOUND = "success_not_found"  # Query succeeded but there is no data
    TEMPORARY_ERROR = "temporary_error"  # May succeed if retried later
    PERMANENT_ERROR = "permanent_error"  # Should not be retried this session


@dataclass(frozen=True)
class LookupResult(Generic[T]):
    """
    Wraps the outcome of a lookup: its status, the data on success and
    a message on failure. Build instances with the classmethods.
    """

    status: ResultStatus
    data: T | None = None
    error_message: str | None = None

    @classmethod
    def success(cls, data: T) -> "LookupResult[T]":
        return cls(ResultStatus.SUCCESS, data)

    @classmethod
    def not_found(cls) -> "LookupResult[T]":
        return cls(ResultStatus.SUCCESS_NOT_FOUND)

    @classmethod
    def temporary_error(cls, message: str) -> "LookupResult[T]":
        return cls(ResultStatus.TEMPORARY_ERROR, error_message=message)

    @classmethod
    def permanent_error(cls, message: str) -> "LookupResult[T]":
        return cls(ResultStatus.PERMANENT_ERROR, error_message=message)

    @property
    def is_success(self) -> bool:
        return self.status is ResultStatus.SUCCESS

    @property
    def is_conclusive(self) -> bool:
        """
        True unless the lookup hit a temporary error. A conclusive result
        either returned data, confirmed there is none, or failed permanently.
        """
        return self.status is not ResultStatus.TEMPORARY_ERROR
