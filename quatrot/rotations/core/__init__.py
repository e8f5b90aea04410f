"""
This package contains the fundamental routines for building, converting, and interpolating rotation quaternions.
It has no dependencies on the :class:`.Rotation` class to avoid circular imports.  All routines here are pure
functions on numpy arrays that can be used as building blocks for the higher-level rotation representation.
"""

import quatrot.rotations.core.constants
import quatrot.rotations.core.conversions
import quatrot.rotations.core.preconditions
import quatrot.rotations.core.quaternion_math

from quatrot.rotations.core.constants import COLLINEAR_EPSILON, SLERP_EPSILON

from quatrot.rotations.core.conversions import (axis_angle_to_quaternion, vectors_to_quaternion,
                                                quaternion_to_axis_angle, quaternion_to_axis_angle_components,
                                                rotmat_to_quaternion, quaternion_to_rotmat)

from quatrot.rotations.core.preconditions import (PreconditionWarning, PreconditionCheckerOptions, PreconditionChecker,
                                                  PRECONDITIONS, configure_preconditions)

from quatrot.rotations.core.quaternion_math import slerp

__all__ = ['axis_angle_to_quaternion', 'vectors_to_quaternion',
           'quaternion_to_axis_angle', 'quaternion_to_axis_angle_components',
           'rotmat_to_quaternion', 'quaternion_to_rotmat', 'slerp',
           'PreconditionWarning', 'PreconditionCheckerOptions', 'PreconditionChecker', 'PRECONDITIONS',
           'configure_preconditions', 'COLLINEAR_EPSILON', 'SLERP_EPSILON']
