import numpy as np

from quatrot._typing import ARRAY_LIKE, DOUBLE_ARRAY, MatrixAccessor


def _check_array_and_shape(input: ARRAY_LIKE,
                           first_axis_length: int | None = None,
                           ndim: int | None = None) -> DOUBLE_ARRAY:
    in_shape = np.shape(input)

    if not in_shape:
        raise ValueError('The input must be shaped')

    if ndim is not None and len(in_shape) != ndim:
        raise ValueError(f'The input must have {ndim} dimension(s)')

    if first_axis_length is not None and in_shape[0] != first_axis_length:
        raise ValueError(f'The length of the first axis must be {first_axis_length}')

    # ensure the value is an array and break mutability
    return np.array(input, dtype=np.float64)


def _check_quaternion_array_and_shape(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    return _check_array_and_shape(quaternion, first_axis_length=4, ndim=1)


def _check_vector_array_and_shape(vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
    return _check_array_and_shape(vector, first_axis_length=3, ndim=1)


def _check_matrix_array_and_shape(matrix: ARRAY_LIKE | MatrixAccessor) -> DOUBLE_ARRAY:

    if _is_element_accessor(matrix):
        # only the [row, col] reads are available, so copy out the rotation block
        return np.array([[matrix[row, col] for col in range(3)] for row in range(3)], dtype=np.float64)

    matrix = _check_array_and_shape(matrix, ndim=2)

    if matrix.shape not in ((3, 3), (4, 4)):
        raise ValueError('The matrix must be 3x3 or 4x4')

    return matrix


def _is_element_accessor(matrix: object) -> bool:
    # array likes (ndarrays, nested sequences, anything exporting __array__) go through numpy instead
    if isinstance(matrix, (np.ndarray, list, tuple)) or hasattr(matrix, '__array__'):
        return False

    return isinstance(matrix, MatrixAccessor)


def _check_output_matrix_shape(matrix: object) -> None:
    # only objects that report a shape can be checked; anything else is trusted to accept [row, col] writes
    shape = getattr(matrix, 'shape', None)

    if shape is not None and tuple(shape) != (4, 4):
        raise ValueError('The output matrix must be 4x4')
