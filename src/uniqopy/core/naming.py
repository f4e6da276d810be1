# src/uniqopy/core/naming.py
from pathlib import Path
from typing import Optional, Tuple


def split_extension(filename: str) -> Tuple[str, Optional[str]]:
    """
    Splits a filename into (stem, extension).

    The extension is whatever follows the last '.', unless that dot is the
    first or the last character of the name. So '.bashrc' and 'notes.' have
    no extension, while '.config.yml' splits into ('.config', 'yml').
    """
    dot = filename.rfind(".")
    if dot <= 0 or dot == len(filename) - 1:
        return filename, None
    return filename[:dot], filename[dot + 1:]


def generate_name(filename: str, timestamp: str, digest: str) -> str:
    """
    foo.txt -> foo.<timestamp>.<digest>.txt
    foo     -> foo.<timestamp>.<digest>
    """
    stem, ext = split_extension(filename)
    parts = [stem, timestamp, digest]
    if ext is not None:
        parts.append(ext)
    return ".".join(parts)


def destination_for(source: Path, timestamp: str, digest: str) -> Path:
    """Sibling path of `source` carrying the generated name."""
    return source.with_name(generate_name(source.name, timestamp, digest))
