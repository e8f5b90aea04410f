# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This package provides the configuration helpers shared throughout quatrot.

Configuration is expressed as :class:`.UserOptions` dataclasses which are applied to the classes that consume them
through the :class:`.UserOptionConfigured` mixin.
"""

from quatrot.utilities.options import UserOptions
from quatrot.utilities.mixin_classes import UserOptionConfigured

__all__ = ["UserOptions", "UserOptionConfigured"]
