"""
Enumerated wire values used by the personalization endpoints.
"""
from enum import Enum

from utils.api_utils import EnumParseFailure


class _WireEnum(str, Enum):
    """String enum whose value is the exact wire representation."""

    @classmethod
    def from_string(cls, raw: str):
        """
        Parse a raw wire string into an enum member.

        Raises:
            EnumParseFailure: If raw matches no member value
        """
        for member in cls:
            if member.value == raw:
                return member
        raise EnumParseFailure(cls.__name__, raw)

    def __str__(self) -> str:
        return self.value


class TopItemType(_WireEnum):
    """Kind of item returned by /me/top/{type}."""

    TRACKS = "tracks"
    ARTISTS = "artists"


class TimeRange(_WireEnum):
    """Time frame over which top items are computed."""

    SHORT_TERM = "short_term"
    """Approximately the last 4 weeks"""

    MEDIUM_TERM = "medium_term"
    """Approximately the last 6 months"""

    LONG_TERM = "long_term"
    """Roughly one year of data"""
