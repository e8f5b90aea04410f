# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
Core conversion routines for rotation representations

This module contains the routines for converting between rotation quaternions, axis-angle pairs, pairs of vectors,
and rotation matrices.  All routines are implemented purely on numpy arrays (or array like objects) and compute in
double precision.

None of these routines validate their numerical inputs (see :mod:`.preconditions`).  Degenerate inputs such as a zero
length axis produce NaN results rather than errors.  Inputs that have the wrong shape raise a ``ValueError``.
"""

import logging

import numpy as np

from quatrot._typing import ARRAY_LIKE, DOUBLE_ARRAY, MatrixAccessor

from quatrot.rotations.core._helpers import (_check_matrix_array_and_shape, _check_quaternion_array_and_shape,
                                             _check_vector_array_and_shape, _check_output_matrix_shape)
from quatrot.rotations.core.constants import COLLINEAR_EPSILON
from quatrot.rotations.core.preconditions import PRECONDITIONS


__all__ = ['axis_angle_to_quaternion', 'vectors_to_quaternion',
           'quaternion_to_axis_angle', 'quaternion_to_axis_angle_components',
           'rotmat_to_quaternion', 'quaternion_to_rotmat']


_LOGGER: logging.Logger = logging.getLogger(__name__)


_NEXT_AXIS = (1, 2, 0)
"""
The cyclic successor of each axis index used when pivoting on the diagonal of a rotation matrix
"""


def axis_angle_to_quaternion(angle: float, x: float | ARRAY_LIKE,
                             y: float | None = None, z: float | None = None) -> DOUBLE_ARRAY:
    r"""
    This function builds the rotation quaternion for a rotation of `angle` radians about an axis.

    The axis may either be given as 3 scalars (``axis_angle_to_quaternion(angle, x, y, z)``) or as a single 3 element
    array like (``axis_angle_to_quaternion(angle, axis)``), in which case it is unpacked and forwarded to the scalar
    form.  The axis does not need to be unit length.

    The angle is treated as a left handed rotation, so it is negated before forming the quaternion:

    .. math::
        \phi = -\theta \\
        \mathbf{q} = \left[\begin{array}{c}\text{sin}(\frac{\phi}{2})\frac{\mathbf{a}}{\left\|\mathbf{a}\right\|}\\
        \text{cos}(\frac{\phi}{2})\end{array}\right]

    For example, a quarter turn about the z axis::

        >>> from quatrot.rotations import axis_angle_to_quaternion
        >>> from numpy import pi
        >>> axis_angle_to_quaternion(pi/2, 0, 0, 1)
        array([-0.        , -0.        , -0.70710678,  0.70710678])

    .. warning::
        The axis must have a non-zero length.  This is not checked; a zero axis gives a quaternion of NaN.

    :param angle: The angle to rotate by in radians
    :param x: The x component of the rotation axis, or the full 3 element rotation axis
    :param y: The y component of the rotation axis (leave as ``None`` when `x` is the full axis)
    :param z: The z component of the rotation axis (leave as ``None`` when `x` is the full axis)
    :return: The rotation quaternion as a length 4 numpy array ordered x, y, z, w
    :raises ValueError: if only one of `y` and `z` is given or if the axis does not have 3 elements
    """

    if y is None and z is None:
        axis = _check_vector_array_and_shape(x)

        return axis_angle_to_quaternion(angle, axis[0], axis[1], axis[2])

    elif y is None or z is None:
        raise ValueError('Either specify all 3 axis components or a single 3 element axis')

    x, y, z = np.float64(x), np.float64(y), np.float64(z)

    PRECONDITIONS.check_nonzero([x, y, z])

    # convert to the right handed convention used by the quaternion formula
    half_angle = 0.5 * -np.float64(angle)

    with np.errstate(divide='ignore', invalid='ignore'):
        inverse_norm = 1.0 / np.sqrt(x * x + y * y + z * z)
        sin_half_angle = np.sin(half_angle)

        return np.array([x * sin_half_angle * inverse_norm,
                         y * sin_half_angle * inverse_norm,
                         z * sin_half_angle * inverse_norm,
                         np.cos(half_angle)])


def vectors_to_quaternion(vector1: ARRAY_LIKE, vector2: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function builds the shortest arc rotation quaternion between two vectors.

    The angle between the vectors is found from their dot product and the rotation axis from their cross product, and
    the quaternion is then built with :func:`axis_angle_to_quaternion`.  Two cases are handled separately because the
    cross product vanishes there:

    * if the vectors are (nearly) coincident the identity quaternion is returned
    * if the vectors are (nearly) opposite the rotation is a half turn about an axis perpendicular to `vector1`.  The
      axis is the cross product of `vector1` with :math:`[1, 1, 1]` where the element corresponding to the largest
      magnitude component of `vector1` has been set to 0.

    "Nearly" here means the cosine of the angle between the vectors is within
    :data:`~.constants.COLLINEAR_EPSILON` of :math:`\pm 1`.

    Because :func:`axis_angle_to_quaternion` treats its angle as left handed, the rotation carries `vector1` onto
    `vector2` when the matrix from :func:`quaternion_to_rotmat` is applied to row vectors
    (``vector1 @ matrix[:3, :3]``).

    .. warning::
        Neither vector may be zero length.  This is not checked; zero vectors give a quaternion of NaN.

    :param vector1: The vector to rotate from
    :param vector2: The vector to rotate to
    :return: The rotation quaternion as a length 4 numpy array ordered x, y, z, w
    """

    vector1 = _check_vector_array_and_shape(vector1)
    vector2 = _check_vector_array_and_shape(vector2)

    PRECONDITIONS.check_nonzero(vector1, 'first vector')
    PRECONDITIONS.check_nonzero(vector2, 'second vector')

    length1 = np.linalg.norm(vector1)
    length2 = np.linalg.norm(vector2)

    with np.errstate(divide='ignore', invalid='ignore'):
        cos_angle = np.dot(vector1, vector2) / (length1 * length2)

    if abs(cos_angle - 1) < COLLINEAR_EPSILON:
        _LOGGER.debug('The vectors are coincident, returning the identity rotation')

        # any axis works for a zero angle
        return axis_angle_to_quaternion(0.0, 1.0, 0.0, 0.0)

    elif abs(cos_angle + 1) < COLLINEAR_EPSILON:
        # any axis perpendicular to vector1 works for a half turn
        biggest = int(np.argmax(np.abs(vector1)))

        helper = np.ones(3)
        helper[biggest] = 0.0

        _LOGGER.debug(f'The vectors are opposite, rotating by pi about an axis orthogonal to component {biggest}')

        return axis_angle_to_quaternion(np.pi, np.cross(vector1, helper))

    axis = np.cross(vector1, vector2)

    with np.errstate(invalid='ignore'):
        angle = np.arccos(cos_angle)

    return axis_angle_to_quaternion(angle, axis)


def quaternion_to_axis_angle(quaternion: ARRAY_LIKE) -> tuple[float, DOUBLE_ARRAY]:
    r"""
    This function recovers the rotation angle and axis from a rotation quaternion.

    The angle and axis are found using

    .. math::
        s = \left\|\mathbf{q}_v\right\| \\
        \theta = 2\text{atan2}(s, q_s) \\
        \hat{\mathbf{a}} = \frac{\mathbf{q}_v}{s}

    The returned angle is therefore always in :math:`[0, 2\pi]` and the returned axis is unit length.  Since the
    quaternion was formed with a negated angle (see :func:`axis_angle_to_quaternion`), the axis recovered from
    ``axis_angle_to_quaternion(angle, axis)`` is ``-axis/|axis|`` for angles in :math:`(0, \pi]`.

    .. warning::
        The quaternion should be unit length and must not be (close to) the identity quaternion, where the axis is
        undefined.  Neither is checked; the identity quaternion gives an axis of NaN.

    :param quaternion: The rotation quaternion ordered x, y, z, w
    :return: The rotation angle in radians and the unit rotation axis as a length 3 numpy array
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    PRECONDITIONS.check_unit(quaternion)
    PRECONDITIONS.check_not_identity(quaternion)

    sin_half_angle = np.sqrt(quaternion[0] * quaternion[0] +
                             quaternion[1] * quaternion[1] +
                             quaternion[2] * quaternion[2])

    angle = 2 * np.arctan2(sin_half_angle, quaternion[3])

    with np.errstate(divide='ignore', invalid='ignore'):
        axis = quaternion[:3] / sin_half_angle

    return float(angle), axis


def quaternion_to_axis_angle_components(quaternion: ARRAY_LIKE) -> tuple[float, float, float, float]:
    """
    This function recovers the rotation angle and the 3 axis components from a rotation quaternion.

    This is the same computation as :func:`quaternion_to_axis_angle` with the axis returned as 3 separate floats.

    :param quaternion: The rotation quaternion ordered x, y, z, w
    :return: The rotation angle in radians followed by the x, y, and z components of the rotation axis
    """

    angle, axis = quaternion_to_axis_angle(quaternion)

    return angle, float(axis[0]), float(axis[1]), float(axis[2])


def rotmat_to_quaternion(rotation_matrix: ARRAY_LIKE | MatrixAccessor) -> DOUBLE_ARRAY:
    r"""
    This function converts a rotation matrix into a rotation quaternion.

    Either a :math:`3\times 3` rotation matrix or a :math:`4\times 4` homogeneous transform can be given; only the
    upper left :math:`3\times 3` block is used.  Any object that only supports
    ``matrix[row, column]`` reads (see :class:`.MatrixAccessor`) is also accepted.  The matrix should be of the form
    produced by :func:`quaternion_to_rotmat`, and this function is its inverse (up to the sign of the quaternion).
    The off diagonal differences below are taken in the order that makes this round trip exact, which is the
    transpose of the order used by the OpenSceneGraph ``Quat::set`` routine.

    When the trace of the matrix is positive the quaternion is found from

    .. math::
        q_s = \frac{1}{2}\sqrt{\text{Tr}(\mathbf{T})+1} \\
        \mathbf{q}_v = \frac{1}{4q_s}\left[\begin{array}{c}t_{21}-t_{12}\\
        t_{02}-t_{20}\\
        t_{10}-t_{01}\end{array}\right]

    Otherwise the largest diagonal element :math:`t_{ii}` is used as the pivot, with :math:`j` and :math:`k` the next
    two axes in cyclic order:

    .. math::
        s = \sqrt{t_{ii} - (t_{jj} + t_{kk}) + 1} \\
        q_i = \frac{s}{2}, \quad
        q_s = \frac{t_{kj} - t_{jk}}{2s}, \quad
        q_j = \frac{t_{ij} + t_{ji}}{2s}, \quad
        q_k = \frac{t_{ik} + t_{ki}}{2s}

    which avoids the loss of precision of the trace formula when the trace is small or negative.  If :math:`s` is
    exactly 0 the remaining components are left at 0 instead of dividing by 0.

    :param rotation_matrix: The rotation matrix to convert, as an array like or a ``matrix[row, column]`` accessor
    :return: The rotation quaternion as a length 4 numpy array ordered x, y, z, w
    :raises ValueError: If the matrix is not 3x3 or 4x4
    """

    matrix = _check_matrix_array_and_shape(rotation_matrix)

    trace = matrix[0, 0] + matrix[1, 1] + matrix[2, 2]

    quaternion = np.zeros(4)

    if trace > 0.0:
        s = np.sqrt(trace + 1.0)
        quaternion[3] = s / 2.0
        s = 0.5 / s

        quaternion[0] = (matrix[2, 1] - matrix[1, 2]) * s
        quaternion[1] = (matrix[0, 2] - matrix[2, 0]) * s
        quaternion[2] = (matrix[1, 0] - matrix[0, 1]) * s

    else:
        i = 0
        if matrix[1, 1] > matrix[0, 0]:
            i = 1
        if matrix[2, 2] > matrix[i, i]:
            i = 2
        j = _NEXT_AXIS[i]
        k = _NEXT_AXIS[j]

        _LOGGER.debug(f'Non-positive trace {trace}, pivoting on diagonal element {i}')

        with np.errstate(invalid='ignore'):
            s = np.sqrt((matrix[i, i] - (matrix[j, j] + matrix[k, k])) + 1.0)

        quaternion[i] = s * 0.5

        if s != 0.0:
            s = 0.5 / s
        else:
            _LOGGER.debug('Zero pivot in the rotation matrix, leaving the remaining components at 0')

        quaternion[3] = (matrix[k, j] - matrix[j, k]) * s
        quaternion[j] = (matrix[i, j] + matrix[j, i]) * s
        quaternion[k] = (matrix[i, k] + matrix[k, i]) * s

    return quaternion


def quaternion_to_rotmat(quaternion: ARRAY_LIKE, out: MatrixAccessor | None = None) -> DOUBLE_ARRAY | MatrixAccessor:
    r"""
    This function converts a rotation quaternion into the equivalent :math:`4\times 4` rotation matrix.

    The rotation block is the standard expansion

    .. math::
        \mathbf{T} = \left[\begin{array}{ccc}1-2(q_y^2+q_z^2) & 2(q_xq_y-q_sq_z) & 2(q_xq_z+q_sq_y) \\
        2(q_xq_y+q_sq_z) & 1-2(q_x^2+q_z^2) & 2(q_yq_z-q_sq_x) \\
        2(q_xq_z-q_sq_y) & 2(q_yq_z+q_sq_x) & 1-2(q_x^2+q_y^2)\end{array}\right]

    which rotates column vectors as ``matrix[:3, :3] @ v``.  The translation row and column are set to 0 and the bottom
    right element to 1, so the result is a pure rotation.

    If `out` is given the matrix is written into it in place (using ``out[row, col] = value``) and `out` is returned.
    Otherwise a new array is returned::

        >>> from quatrot.rotations import quaternion_to_rotmat
        >>> quaternion_to_rotmat([0, 0, 0, 1])
        array([[1., 0., 0., 0.],
               [0., 1., 0., 0.],
               [0., 0., 1., 0.],
               [0., 0., 0., 1.]])

    .. warning::
        The quaternion should be unit length.  This is not checked.

    :param quaternion: The rotation quaternion ordered x, y, z, w
    :param out: An optional 4x4 matrix to write the result into
    :return: The rotation matrix (`out` if it was given)
    :raises ValueError: If `out` reports a shape other than 4x4
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    PRECONDITIONS.check_unit(quaternion)

    if out is None:
        out = np.empty((4, 4), dtype=np.float64)
    else:
        _check_output_matrix_shape(out)

    qx, qy, qz, qw = quaternion

    # doubled components so each cross term below carries its factor of 2
    x2 = qx + qx
    y2 = qy + qy
    z2 = qz + qz

    xx = qx * x2
    xy = qx * y2
    xz = qx * z2

    yy = qy * y2
    yz = qy * z2
    zz = qz * z2

    wx = qw * x2
    wy = qw * y2
    wz = qw * z2

    out[0, 0] = 1.0 - (yy + zz)
    out[0, 1] = xy - wz
    out[0, 2] = xz + wy
    out[0, 3] = 0.0

    out[1, 0] = xy + wz
    out[1, 1] = 1.0 - (xx + zz)
    out[1, 2] = yz - wx
    out[1, 3] = 0.0

    out[2, 0] = xz - wy
    out[2, 1] = yz + wx
    out[2, 2] = 1.0 - (xx + yy)
    out[2, 3] = 0.0

    out[3, 0] = 0.0
    out[3, 1] = 0.0
    out[3, 2] = 0.0
    out[3, 3] = 1.0

    return out
