import quatrot.rotations.core
import quatrot.rotations.rotation

from quatrot.rotations.core import *
from quatrot.rotations.rotation import Rotation

__all__ = ['axis_angle_to_quaternion', 'vectors_to_quaternion',
           'quaternion_to_axis_angle', 'quaternion_to_axis_angle_components',
           'rotmat_to_quaternion', 'quaternion_to_rotmat', 'slerp',
           'PreconditionWarning', 'PreconditionCheckerOptions', 'PreconditionChecker', 'PRECONDITIONS',
           'configure_preconditions', 'Rotation']


r"""
This package defines the quaternion value type used to represent rotations in quatrot and the routines for converting
between the rotation representations it supports.  The representations are described as follows:

.. _rotation-representation-table:

=================  =====================================================================================================
Representation     Description
=================  =====================================================================================================
quaternion         A 4 element rotation quaternion of the form
                   :math:`\mathbf{q}=\left[\begin{array}{c} q_x \\ q_y \\ q_z \\ q_s\end{array}\right]=
                   \left[\begin{array}{c}\text{sin}(\frac{\phi}{2})\hat{\mathbf{x}}\\
                   \text{cos}(\frac{\phi}{2})\end{array}\right]`
                   where :math:`\hat{\mathbf{x}}` is a 3 element unit vector representing the axis of rotation and
                   :math:`\phi` is the right handed angle to rotate about that vector.  Note that quaternions are not
                   unique in that the rotation represented by :math:`\mathbf{q}` is the same rotation represented by
                   :math:`-\mathbf{q}`.
axis-angle         An angle :math:`\theta` in radians and a 3 element axis.  The angle is left handed, so
                   :math:`\phi=-\theta` in the quaternion above.  The axis does not need to be unit length when
                   building a quaternion but must not be zero.
rotation matrix    A :math:`4\times 4` matrix whose upper left :math:`3\times 3` block is orthonormal and whose
                   translation is zero, such that ``matrix[:3, :3] @ v`` rotates the column vector ``v``.  A
                   :math:`3\times 3` matrix is also accepted when reading.
=================  =====================================================================================================

The :class:`.Rotation` object is the value type that will be used by most users.  It stores the quaternion in single
precision and offers constructors and in-place setters for each representation, as well as spherical linear
interpolation between two rotations.

The functional routines in :mod:`.core` perform the same conversions on plain numpy arrays in double precision.
"""
