import warnings

from unittest import TestCase

import numpy as np

from quatrot import rotations as rot
from quatrot.rotations import PRECONDITIONS, PreconditionChecker, PreconditionCheckerOptions, PreconditionWarning


class TestPreconditionChecker(TestCase):

    def test_disabled_by_default(self):

        checker = PreconditionChecker()

        self.assertFalse(checker.enabled)

        with warnings.catch_warnings():
            warnings.simplefilter('error')

            self.assertTrue(checker.check_nonzero([0, 0, 0]))
            self.assertTrue(checker.check_unit([0, 0, 0, 2]))
            self.assertTrue(checker.check_not_identity([0, 0, 0, 1]))

    def test_enabled(self):

        checker = PreconditionChecker(PreconditionCheckerOptions(enabled=True))

        with self.assertWarns(PreconditionWarning):
            self.assertFalse(checker.check_nonzero([0, 0, 0]))

        with self.assertWarns(PreconditionWarning):
            self.assertFalse(checker.check_unit([0, 0, 0, 2]))

        with self.assertWarns(PreconditionWarning):
            self.assertFalse(checker.check_not_identity([0, 0, 0, 1]))

        with warnings.catch_warnings():
            warnings.simplefilter('error')

            self.assertTrue(checker.check_nonzero([0, 0, 1e-3]))
            self.assertTrue(checker.check_unit([0, 0, 0, 1 + 1e-5]))
            self.assertTrue(checker.check_not_identity([0, 0, 1, 0]))

    def test_tolerances(self):

        checker = PreconditionChecker(PreconditionCheckerOptions(enabled=True, unit_tolerance=0.5,
                                                                 zero_tolerance=0.1))

        with warnings.catch_warnings():
            warnings.simplefilter('error')

            self.assertTrue(checker.check_unit([0, 0, 0, 1.4]))

        with self.assertWarns(PreconditionWarning):
            self.assertFalse(checker.check_nonzero([0.05, 0, 0]))

    def test_reset_settings(self):

        checker = PreconditionChecker()

        checker.enabled = True
        checker.unit_tolerance = 1.0

        checker.reset_settings()

        self.assertFalse(checker.enabled)
        self.assertEqual(checker.unit_tolerance, 1e-4)


class TestConfigurePreconditions(TestCase):

    def tearDown(self):

        PRECONDITIONS.reset_settings()

    def test_routines_warn_when_enabled(self):

        checker = rot.configure_preconditions(PreconditionCheckerOptions(enabled=True))

        self.assertIs(checker, PRECONDITIONS)
        self.assertTrue(PRECONDITIONS.enabled)

        with self.assertWarns(PreconditionWarning):
            q = rot.axis_angle_to_quaternion(1.0, 0, 0, 0)

        # the computation is unchanged by the check
        self.assertTrue(np.isnan(q[:3]).all())

        with self.assertWarns(PreconditionWarning):
            rot.vectors_to_quaternion([0, 0, 0], [1, 0, 0])

        with self.assertWarns(PreconditionWarning):
            rot.quaternion_to_axis_angle([0, 0, 0, 1])

        with self.assertWarns(PreconditionWarning):
            rot.quaternion_to_rotmat([0, 0, 0, 2])

        with self.assertWarns(PreconditionWarning):
            rot.slerp([0, 0, 0, 1], [1, 1, 0, 0], 0.5)

    def test_valid_inputs_are_silent(self):

        rot.configure_preconditions(PreconditionCheckerOptions(enabled=True))

        with warnings.catch_warnings():
            warnings.simplefilter('error')

            q0 = rot.axis_angle_to_quaternion(1.0, 1, 2, 3)
            q1 = rot.vectors_to_quaternion([1, 0, 0], [0, 0, 1])

            rot.quaternion_to_axis_angle(q0)
            rot.quaternion_to_rotmat(q1)
            rot.slerp(q0, q1, 0.3)

            rot.Rotation.from_axis_angle(0.4, [0, 1, 0]).get_rotate()

    def test_reset(self):

        rot.configure_preconditions(PreconditionCheckerOptions(enabled=True))

        PRECONDITIONS.reset_settings()

        self.assertFalse(PRECONDITIONS.enabled)

        with warnings.catch_warnings():
            warnings.simplefilter('error')

            rot.quaternion_to_rotmat([0, 0, 0, 2])
