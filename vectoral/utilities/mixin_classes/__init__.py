"""
This package contains helpful mixin classes to provide basic functionality throughout vectoral.
"""

from vectoral.utilities.mixin_classes.text_serialization import TextSerializable
from vectoral.utilities.mixin_classes.user_option_configured import UserOptionConfigured

__all__ = ["TextSerializable", "UserOptionConfigured"]
