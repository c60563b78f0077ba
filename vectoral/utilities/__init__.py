"""
This package provides the configuration and serialization infrastructure shared by the rest of vectoral.
"""

from vectoral.utilities.options import UserOptions
from vectoral.utilities.mixin_classes import TextSerializable, UserOptionConfigured

__all__ = ["UserOptions", "TextSerializable", "UserOptionConfigured"]
