"""
This package contains helpful mixin classes to provide basic functionality throughout quatrot.
"""

from quatrot.utilities.mixin_classes.user_option_configured import UserOptionConfigured

__all__ = ["UserOptionConfigured"]
