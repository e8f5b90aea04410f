import logging

import numpy as np

from quatrot._typing import ARRAY_LIKE, DOUBLE_ARRAY, DatetimeLike

from quatrot.rotations.core._helpers import _check_quaternion_array_and_shape
from quatrot.rotations.core.constants import SLERP_EPSILON
from quatrot.rotations.core.preconditions import PRECONDITIONS

__all__ = ["slerp"]


_LOGGER: logging.Logger = logging.getLogger(__name__)


def slerp(quaternion0: ARRAY_LIKE, quaternion1: ARRAY_LIKE,
          time: float | DatetimeLike,
          time0: float | DatetimeLike = 0, time1: float | DatetimeLike = 1) -> DOUBLE_ARRAY:
    r"""
    This function performs spherical linear interpolation of rotation quaternions.

    SLERP of quaternions blends the two quaternions along the great circle arc connecting them, which gives a
    constant angular velocity interpolation (Shoemake, SIGGRAPH 1985):

    .. math::
        \omega = \text{cos}^{-1}(\mathbf{q}_0^T\mathbf{q}_1)\\
        \mathbf{q}=\mathbf{q}_0\frac{\text{sin}((1-p)\omega)}{\text{sin}(\omega)}+
        \mathbf{q}_1\frac{\text{sin}(p\omega)}{\text{sin}(\omega)}

    where :math:`\mathbf{q}` is the interpolated quaternion, :math:`\mathbf{q}_0` is the starting quaternion,
    :math:`\mathbf{q}_1` is the ending quaternion, and :math:`p` is the fractional percent of the way between
    :math:`\mathbf{q}_0` and :math:`\mathbf{q}_1` that we want to interpolate at (:math:`p\in[0, 1]`).

    When :math:`1-\mathbf{q}_0^T\mathbf{q}_1` is not larger than :data:`~.constants.SLERP_EPSILON` the quaternions are
    so close that :math:`\text{sin}(\omega)` vanishes, and a plain linear blend
    :math:`\mathbf{q}_0(1-p)+\mathbf{q}_1p` is used instead.

    When using this function you can either specify the argument `time` as the fractional percent that you want to
    interpolate at, or specify the keyword arguments `time0` and `time1` to be the times corresponding to the first and
    second quaternion respectively and the function will compute the fractional percent for you.  When using this method
    it is also possible to specify all three of `time`, `time0`, and `time1` as python datetime objects.

    The result is not normalized, and the second quaternion is never negated.  When
    :math:`\mathbf{q}_0^T\mathbf{q}_1 < 0` the interpolation therefore goes the long way around, unlike the textbook
    form of slerp which flips :math:`\mathbf{q}_1` to take the shorter path.  Negate one of the inputs before calling
    if the short path is wanted.

    :param quaternion0: The starting quaternion
    :param quaternion1: The ending quaternion
    :param time: The time to interpolate the quaternions at, as a fractional percent or as the actual time between
                `time0` and `time1`
    :param time0: the time corresponding to the first quaternion. Leave at 0 if you are specifying `time` as a
                  fractional percent
    :param time1: the time corresponding to the second quaternion. Leave at 1 if you are specifying `time` as a
                  fractional percent
    :return: The interpolated quaternion
    """

    # compute the fractional percent we are interpolating at
    try:
        dt = float((time - time0) / (time1 - time0))  # type: ignore
    except TypeError:
        raise TypeError('time, time0, and time1 must support subtraction resulting in a type that supports true '
                        'division. Typically this means they should all be floats or all be DatetimeLike objects')

    q0 = _check_quaternion_array_and_shape(quaternion0)
    q1 = _check_quaternion_array_and_shape(quaternion1)

    PRECONDITIONS.check_unit(q0, 'starting quaternion')
    PRECONDITIONS.check_unit(q1, 'ending quaternion')

    # get the cosine of the angle between the quaternions
    cos_omega = float(np.dot(q0, q1))

    if (1.0 - cos_omega) > SLERP_EPSILON:
        # ensure the domain for acos (only will leave due to numerical issues)
        omega = np.arccos(max(cos_omega, -1.0))
        sin_omega = np.sin(omega)

        with np.errstate(divide='ignore', invalid='ignore'):
            scale0 = np.sin((1.0 - dt) * omega) / sin_omega
            scale1 = np.sin(dt * omega) / sin_omega

    else:
        _LOGGER.debug(f'The quaternions are nearly identical (cos omega = {cos_omega}), blending linearly')

        scale0 = 1.0 - dt
        scale1 = dt

    return q0 * scale0 + q1 * scale1
