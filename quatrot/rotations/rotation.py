from typing import Self

import copy

import numpy as np

from quatrot.rotations.core.conversions import (axis_angle_to_quaternion, vectors_to_quaternion,
                                                quaternion_to_axis_angle, quaternion_to_axis_angle_components,
                                                rotmat_to_quaternion, quaternion_to_rotmat)
from quatrot.rotations.core.quaternion_math import slerp

from quatrot._typing import ARRAY_LIKE, DOUBLE_ARRAY, SINGLE_ARRAY, MatrixAccessor


class Rotation:
    """
    A quaternion value representing a rotation in 3D.

    The :class:`Rotation` class stores the four components of a rotation quaternion, the vector part ``x, y, z`` and
    the scalar part ``w``, in single precision.  It can be built from any of the representations understood by
    :mod:`quatrot.rotations` and converted back to them:

    * an angle and an axis (:meth:`from_axis_angle`, :meth:`make_rotate`, :meth:`get_rotate`)
    * a pair of vectors to rotate between (:meth:`from_vectors`, :meth:`make_rotate_between`)
    * a rotation matrix (:meth:`from_matrix`, :meth:`set`, :meth:`get`, :meth:`to_matrix`)
    * two other rotations to interpolate between (:meth:`interpolate`, :meth:`slerp`)

    For example::

        >>> from quatrot.rotations import Rotation
        >>> from numpy import pi
        >>> Rotation.from_axis_angle(pi/2, 0, 0, 1)
        Rotation(array([-0.        , -0.        , -0.70710677,  0.70710677], dtype=float32))

    Components set directly (through the constructor, :attr:`quaternion`, or the component properties) are stored as
    given, so it is up to the caller to keep them unit length.  The routines that build a rotation always produce a
    unit quaternion, and the routines that consume one assume it.

    The equality operator compares the four components exactly.
    """

    def __init__(self, data: ARRAY_LIKE | Self | None = None):
        """
        Initialize the Rotation object.

        :param data: The rotation data to initialize the class with, either 4 quaternion components ordered x, y, z,
                     w, a 3x3/4x4 rotation matrix, or another :class:`Rotation` whose components are
                     copied.  Defaults to the identity rotation.
        """

        self._quaternion = np.array([0, 0, 0, 1], dtype=np.float32)

        if data is not None:
            self.interp_rotation(data)

    @property
    def quaternion(self) -> SINGLE_ARRAY:
        """
        This property stores the quaternion components ordered x, y, z, w as a single precision numpy array.

        Setting it stores the 4 components exactly as given (after conversion to single precision); no normalization
        is performed.
        """

        return self._quaternion

    @quaternion.setter
    def quaternion(self, data: ARRAY_LIKE | Self):

        if isinstance(data, Rotation):

            self._quaternion = data.quaternion.copy()

        else:

            data = np.asanyarray(data, dtype=np.float32).ravel()

            if data.size != 4:
                raise ValueError('The quaternion must be length 4')

            self._quaternion = data.copy()

    @property
    def q(self) -> SINGLE_ARRAY:
        """
        This is an alias to the :attr:`.quaternion` property.
        """
        return self._quaternion

    @q.setter
    def q(self, data: ARRAY_LIKE | Self):
        self.quaternion = data

    @property
    def x(self) -> float:
        """The x component of the vector part"""
        return float(self._quaternion[0])

    @x.setter
    def x(self, value: float):
        self._quaternion[0] = value

    @property
    def y(self) -> float:
        """The y component of the vector part"""
        return float(self._quaternion[1])

    @y.setter
    def y(self, value: float):
        self._quaternion[1] = value

    @property
    def z(self) -> float:
        """The z component of the vector part"""
        return float(self._quaternion[2])

    @z.setter
    def z(self, value: float):
        self._quaternion[2] = value

    @property
    def w(self) -> float:
        """The scalar part"""
        return float(self._quaternion[3])

    @w.setter
    def w(self, value: float):
        self._quaternion[3] = value

    @property
    def q_vector(self) -> SINGLE_ARRAY:
        """
        This is an alias to the first three elements of the quaternion array (the vector portion of the quaternion)

        This property is read only.
        """

        return self._quaternion[:3]

    @property
    def q_scalar(self) -> float:
        """
        This is an alias to the last element of the quaternion array (the scalar portion of the quaternion)

        This property is read only.
        """

        return float(self._quaternion[-1])

    def as_vec4(self) -> DOUBLE_ARRAY:
        """
        Returns the 4 components as a new double precision array, the form used for the dot products and blends of
        the conversion routines.
        """

        return self._quaternion.astype(np.float64)

    def length2(self) -> float:
        """
        Returns the squared length of the quaternion.
        """

        vec4 = self.as_vec4()

        return float(vec4 @ vec4)

    def length(self) -> float:
        """
        Returns the length of the quaternion, which is 1 for a valid rotation.
        """

        return float(np.sqrt(self.length2()))

    def interp_rotation(self, data: ARRAY_LIKE | Self):
        """
        This method interprets rotation data based on its shape and type.

        If the type of the input is a :class:`Rotation` object then the current instance is overwritten with its
        components.  Otherwise the data is interpreted by size: 4 elements are quaternion components, 9 or 16
        elements a 3x3 or 4x4 rotation matrix (see :meth:`set`).

        :raises ValueError: If the size of the input data is not 4, 9, or 16
        :param data: The rotation data to be interpreted
        """

        if isinstance(data, Rotation):

            self.quaternion = data

        else:

            numpy_data = np.asanyarray(data, dtype=np.float64)

            if numpy_data.size == 4:
                self.quaternion = numpy_data

            elif numpy_data.size == 9:
                self.set(numpy_data.reshape(3, 3))

            elif numpy_data.size == 16:
                self.set(numpy_data.reshape(4, 4))

            else:
                raise ValueError('The specified rotation data cannot be interpreted.')

    def make_rotate(self, angle: float, x: float | ARRAY_LIKE, y: float | None = None, z: float | None = None):
        """
        Sets this rotation to a rotation of `angle` radians about an axis.

        The axis is given either as 3 scalars or as one 3 element array like.  See
        :func:`.axis_angle_to_quaternion` for the conventions used.

        :param angle: The angle to rotate by in radians
        :param x: The x component of the rotation axis, or the full rotation axis
        :param y: The y component of the rotation axis
        :param z: The z component of the rotation axis
        """

        self.quaternion = axis_angle_to_quaternion(angle, x, y, z)

    def make_rotate_between(self, vector1: ARRAY_LIKE, vector2: ARRAY_LIKE):
        """
        Sets this rotation to the shortest arc rotation between two vectors.

        See :func:`.vectors_to_quaternion`.

        :param vector1: The vector to rotate from
        :param vector2: The vector to rotate to
        """

        self.quaternion = vectors_to_quaternion(vector1, vector2)

    def get_rotate(self) -> tuple[float, DOUBLE_ARRAY]:
        """
        Returns the rotation angle and unit axis of this rotation.

        See :func:`.quaternion_to_axis_angle`.  The axis is undefined for the identity rotation.

        :return: The angle in radians and the axis as a length 3 array
        """

        return quaternion_to_axis_angle(self.as_vec4())

    def get_rotate_components(self) -> tuple[float, float, float, float]:
        """
        Returns the rotation angle and the 3 components of the unit axis of this rotation.

        :return: The angle in radians followed by the x, y, and z components of the axis
        """

        return quaternion_to_axis_angle_components(self.as_vec4())

    def set(self, matrix: ARRAY_LIKE | MatrixAccessor):
        """
        Sets this rotation from the rotation block of a 3x3 or 4x4 matrix.

        See :func:`.rotmat_to_quaternion`.

        :param matrix: The rotation matrix, as an array like or an object supporting ``matrix[row, column]`` reads
        """

        self.quaternion = rotmat_to_quaternion(matrix)

    def get(self, matrix: MatrixAccessor) -> MatrixAccessor:
        """
        Writes this rotation into a caller owned 4x4 matrix in place.

        The rotation block is filled, the translation is cleared, and the bottom right element is set to 1.  See
        :func:`.quaternion_to_rotmat`.

        :param matrix: The 4x4 matrix to fill
        :return: `matrix`
        """

        return quaternion_to_rotmat(self.as_vec4(), out=matrix)

    def to_matrix(self) -> DOUBLE_ARRAY:
        """
        Returns this rotation as a new 4x4 double precision rotation matrix.
        """

        return quaternion_to_rotmat(self.as_vec4())

    def slerp(self, t: float, start: Self, end: Self):
        """
        Sets this rotation to the spherical linear interpolation between two rotations.

        The blend is computed in double precision and narrowed to single precision on storage.  See :func:`.slerp`
        for the details, including the fact that the shorter path is not enforced.

        :param t: The fraction of the way from `start` to `end` to interpolate to
        :param start: The rotation at ``t=0``
        :param end: The rotation at ``t=1``
        """

        self.quaternion = slerp(Rotation(start).as_vec4(), Rotation(end).as_vec4(), t)

    @classmethod
    def from_axis_angle(cls, angle: float, x: float | ARRAY_LIKE,
                        y: float | None = None, z: float | None = None) -> Self:
        """
        Creates a rotation of `angle` radians about an axis.

        :param angle: The angle to rotate by in radians
        :param x: The x component of the rotation axis, or the full rotation axis
        :param y: The y component of the rotation axis
        :param z: The z component of the rotation axis
        :return: The new rotation
        """

        out = cls()
        out.make_rotate(angle, x, y, z)

        return out

    @classmethod
    def from_vectors(cls, vector1: ARRAY_LIKE, vector2: ARRAY_LIKE) -> Self:
        """
        Creates the shortest arc rotation between two vectors.

        :param vector1: The vector to rotate from
        :param vector2: The vector to rotate to
        :return: The new rotation
        """

        out = cls()
        out.make_rotate_between(vector1, vector2)

        return out

    @classmethod
    def from_matrix(cls, matrix: ARRAY_LIKE | MatrixAccessor) -> Self:
        """
        Creates a rotation from the rotation block of a 3x3 or 4x4 matrix.

        :param matrix: The rotation matrix
        :return: The new rotation
        """

        out = cls()
        out.set(matrix)

        return out

    @classmethod
    def interpolate(cls, t: float, start: Self, end: Self) -> Self:
        """
        Creates the spherical linear interpolation between two rotations.

        :param t: The fraction of the way from `start` to `end` to interpolate to
        :param start: The rotation at ``t=0``
        :param end: The rotation at ``t=1``
        :return: The new rotation
        """

        out = cls()
        out.slerp(t, start, end)

        return out

    def __eq__(self, other) -> bool:

        if other is None:
            return False

        # check that other is a rotation object, if not make it into one
        if not isinstance(other, Rotation):
            try:
                other = Rotation(other)
            except (ValueError, TypeError):
                # if we're here then other isn't a representation of rotation that we understand
                return False

        # check that the quaternions are the same
        return bool((self._quaternion == other.quaternion).all())

    def __repr__(self) -> str:
        return 'Rotation({0!r})'.format(self.quaternion)

    def __str__(self) -> str:
        return str(self.quaternion)

    def copy(self) -> Self:
        """
        Returns a deep copy of self.

        :return: A deep copy of self breaking all mutability
        """

        return copy.deepcopy(self)
