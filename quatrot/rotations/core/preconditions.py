"""
This module provides optional checking of the preconditions of the rotation routines.

None of the rotation routines validate their numerical inputs.  A zero length rotation axis, a pair of zero length
vectors, or a non-unit quaternion silently produce NaN or meaningless results, which keeps the routines as cheap as
possible.  While debugging it is often useful to know when one of these preconditions is violated, so the routines
consult the module level :data:`PRECONDITIONS` checker, which is disabled by default.  When enabled, a violated
precondition issues a :class:`PreconditionWarning` and the computation continues exactly as it would have otherwise.

To turn checking on::

    >>> from quatrot.rotations import configure_preconditions, PreconditionCheckerOptions
    >>> configure_preconditions(PreconditionCheckerOptions(enabled=True))

and :meth:`PRECONDITIONS.reset_settings <.UserOptionConfigured.reset_settings>` to restore the defaults.
"""

import logging

import warnings

from dataclasses import dataclass

import numpy as np

from quatrot._typing import ARRAY_LIKE
from quatrot.utilities.options import UserOptions
from quatrot.utilities.mixin_classes import UserOptionConfigured


__all__ = ['PreconditionWarning', 'PreconditionCheckerOptions', 'PreconditionChecker', 'PRECONDITIONS',
           'configure_preconditions']


_LOGGER: logging.Logger = logging.getLogger(__name__)


class PreconditionWarning(UserWarning):
    """
    Issued when an input violates a documented precondition of a rotation routine and checking is enabled.
    """


@dataclass
class PreconditionCheckerOptions(UserOptions):
    """
    Options for the :class:`PreconditionChecker`.
    """

    enabled: bool = False
    """
    Whether preconditions are checked at all.
    """

    unit_tolerance: float = 1e-4
    """
    The allowed absolute deviation of a quaternion's length from 1.
    """

    zero_tolerance: float = 1e-12
    """
    Vectors whose length is at or below this value are considered zero length.
    """


class PreconditionChecker(UserOptionConfigured[PreconditionCheckerOptions], PreconditionCheckerOptions):
    """
    Checks the inputs of the rotation routines against their documented preconditions.

    Each check returns ``True`` if the precondition holds (or checking is disabled) and ``False`` otherwise, issuing a
    :class:`PreconditionWarning` in the latter case.  The checks never raise and never modify their inputs.
    """

    def __init__(self, options: PreconditionCheckerOptions | None = None):
        """
        :param options: the options to configure the checker with
        """

        super().__init__(PreconditionCheckerOptions, options=options)

    def _violated(self, message: str) -> bool:

        _LOGGER.debug(message)
        warnings.warn(message, PreconditionWarning, stacklevel=3)

        return False

    def check_nonzero(self, vector: ARRAY_LIKE, name: str = 'axis') -> bool:
        """
        Checks that a vector has a non-zero length.

        :param vector: the vector to check
        :param name: what the vector is, used in the warning message
        :return: whether the precondition holds
        """

        if not self.enabled:
            return True

        length = np.linalg.norm(np.asanyarray(vector, dtype=np.float64))

        if not length > self.zero_tolerance:
            return self._violated(f'The {name} must have a non-zero length (got {length:e})')

        return True

    def check_unit(self, quaternion: ARRAY_LIKE, name: str = 'quaternion') -> bool:
        """
        Checks that a quaternion has unit length within :attr:`unit_tolerance`.

        :param quaternion: the quaternion to check
        :param name: what the quaternion is, used in the warning message
        :return: whether the precondition holds
        """

        if not self.enabled:
            return True

        length = np.linalg.norm(np.asanyarray(quaternion, dtype=np.float64))

        if not abs(length - 1) <= self.unit_tolerance:
            return self._violated(f'The {name} must be unit length (got a length of {length:e})')

        return True

    def check_not_identity(self, quaternion: ARRAY_LIKE) -> bool:
        """
        Checks that a quaternion has a rotation axis that can be recovered, that is that its vector part is not zero.

        :param quaternion: the quaternion to check
        :return: whether the precondition holds
        """

        if not self.enabled:
            return True

        sin_half = np.linalg.norm(np.asanyarray(quaternion, dtype=np.float64)[:3])

        if not sin_half > self.zero_tolerance:
            return self._violated('The rotation axis of an identity quaternion is undefined')

        return True


PRECONDITIONS: PreconditionChecker = PreconditionChecker()
"""
The checker consulted by all of the rotation routines.
"""


def configure_preconditions(options: PreconditionCheckerOptions) -> PreconditionChecker:
    """
    Applies new options to the module level :data:`PRECONDITIONS` checker.

    The options the checker was created with are kept, so :meth:`PRECONDITIONS.reset_settings` still restores the
    defaults.

    :param options: the options to apply
    :return: the configured checker
    """

    options.apply_options(PRECONDITIONS)

    return PRECONDITIONS
