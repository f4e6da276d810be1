# src/uniqopy/core/digest.py
import hashlib
import stat
from pathlib import Path

from uniqopy.models import NotAFileError, ReadError, SourceFile


def md5_hex(data: bytes) -> str:
    """
    MD5 of the whole byte sequence as 32 lowercase hex characters.

    MD5 is not collision resistant; the digest is a content fingerprint
    for naming, not a security guarantee.
    """
    return hashlib.md5(data).hexdigest()


def read_source(path: Path) -> SourceFile:
    """Reads the entire file into memory. Raises ReadError on any failure."""
    try:
        st = path.stat()
    except OSError as e:
        raise ReadError(path, e.strerror or e) from e

    if not stat.S_ISREG(st.st_mode):
        raise NotAFileError(path)

    try:
        content = path.read_bytes()
    except OSError as e:
        raise ReadError(path, e.strerror or e) from e

    return SourceFile(path=path, content=content)
