# src/uniqopy/core/copier.py
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, Union

from uniqopy.core.clock import timestamp
from uniqopy.core.digest import md5_hex, read_source
from uniqopy.core.naming import destination_for
from uniqopy.models import CopyResult, WriteError


def write_copy(destination: Path, content: bytes) -> int:
    """
    Writes `content` to `destination` and returns the number of bytes written.
    An existing file at `destination` is overwritten. Nothing is rolled back
    if the write fails halfway.
    """
    try:
        with open(destination, "wb") as f:
            return f.write(content)
    except OSError as e:
        raise WriteError(destination, e.strerror or e) from e


def make_unique_copy(
    path: Union[str, Path],
    now: Optional[Callable[[], datetime]] = None,
    on_destination: Optional[Callable[[Path, Path], None]] = None,
) -> CopyResult:
    """
    Read -> hash -> timestamp -> name -> write.

    `on_destination` is called with (source, destination) once the new name
    is known and before anything is written.
    """
    source = read_source(Path(path))
    digest = md5_hex(source.content)
    ts = timestamp(now)
    destination = destination_for(source.path, ts, digest)

    if on_destination is not None:
        on_destination(source.path, destination)

    written = write_copy(destination, source.content)
    return CopyResult(
        source=source.path,
        destination=destination,
        bytes_copied=written,
        digest=digest,
        timestamp=ts,
    )
