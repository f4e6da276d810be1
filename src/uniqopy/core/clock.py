# src/uniqopy/core/clock.py
from datetime import datetime
from typing import Callable, Optional

from uniqopy.config import TIMESTAMP_FORMAT


def format_timestamp(moment: datetime) -> str:
    return moment.strftime(TIMESTAMP_FORMAT)


def timestamp(now: Optional[Callable[[], datetime]] = None) -> str:
    """Current local time (naive, process timezone), formatted for filenames."""
    moment = now() if now is not None else datetime.now()
    return format_timestamp(moment)
