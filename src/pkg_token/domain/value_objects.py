# src/pkg_token/domain/value_objects.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

# --- Time -----------------------------------------------------------------

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_ONE_MILLISECOND = timedelta(milliseconds=1)


def timestamp_from_millis(millis: int) -> datetime:
    """
    Milliseconds since the Unix epoch -> aware UTC datetime.

    Uses timedelta arithmetic instead of `datetime.fromtimestamp` so whole
    milliseconds convert exactly.
    """
    return EPOCH + timedelta(milliseconds=millis)


def to_millis(moment: datetime) -> int:
    """
    Aware (or naive, read as UTC) datetime -> whole milliseconds since epoch.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return (moment - EPOCH) // _ONE_MILLISECOND


# --- Token structure ------------------------------------------------------


@dataclass(frozen=True, slots=True)
class TokenSegments:
    """
    The three dot-separated parts of a compact token, still encoded.

    Only `body` is ever decoded here; `header` and `signature` are kept so
    callers doing their own verification don't have to split again.
    """
    header: str
    body: str
    signature: str
