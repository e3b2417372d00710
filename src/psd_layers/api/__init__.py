"""
High-level API: decoded documents and layers.
"""

from .document import Document as Document
from .layers import Layer as Layer

__all__ = ["Document", "Layer"]
