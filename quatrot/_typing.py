from typing import Union, Protocol, runtime_checkable, Any
from datetime import datetime
from pandas import Timestamp

import numpy as np
import numpy.typing as npt

DOUBLE_ARRAY = np.typing.NDArray[np.float64]
SINGLE_ARRAY = np.typing.NDArray[np.float32]
ARRAY_LIKE = npt.ArrayLike

DatetimeLike = Union[datetime, Timestamp]


@runtime_checkable
class MatrixAccessor(Protocol):
    """
    Anything that can be read and written with ``matrix[row, column]``.

    numpy arrays satisfy this protocol, which is how matrices are normally passed around.
    """

    def __getitem__(self, key: tuple[int, int], /) -> Any: ...

    def __setitem__(self, key: tuple[int, int], value: Any, /) -> None: ...
