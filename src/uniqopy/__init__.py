# src/uniqopy/__init__.py
from uniqopy.config import VERSION as __version__
from uniqopy.core.copier import make_unique_copy

__all__ = ["__version__", "make_unique_copy"]
