from unittest import TestCase

import numpy as np

from quatrot import rotations as rot


SQRT_HALF = np.sqrt(2) / 2


class TestRotation(TestCase):

    def check_rotation(self, rotation, quaternion, decimal=6):

        np.testing.assert_array_almost_equal(rotation.q, quaternion, decimal=decimal)
        np.testing.assert_array_almost_equal(rotation.q_vector, quaternion[:3], decimal=decimal)
        self.assertAlmostEqual(rotation.q_scalar, quaternion[-1], places=decimal)
        self.assertEqual(rotation.quaternion.dtype, np.float32)

    def test_init(self):

        r = rot.Rotation()

        self.check_rotation(r, [0, 0, 0, 1])

        r = rot.Rotation([1, 2, 3, 4])

        # components are stored as given
        np.testing.assert_array_equal(r.q, [1, 2, 3, 4])

        r = rot.Rotation(np.eye(3))

        self.check_rotation(r, [0, 0, 0, 1])

        r = rot.Rotation([[0, 1, 0, 0], [-1, 0, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1]])

        self.check_rotation(r, [0, 0, -SQRT_HALF, SQRT_HALF])

        r2 = rot.Rotation(r)

        self.assertEqual(r, r2)
        self.assertIsNot(r, r2)

        with self.assertRaises(ValueError):
            rot.Rotation([1, 2, 3])

    def test_quaternion_setter(self):

        r = rot.Rotation()

        r.quaternion = [0.5, 0.5, 0.5, 0.5]

        self.check_rotation(r, [0.5, 0.5, 0.5, 0.5])

        source = rot.Rotation([0, 1, 0, 0])

        r.q = source

        self.check_rotation(r, [0, 1, 0, 0])

        # the components are copied, not shared
        source.x = 1
        self.check_rotation(r, [0, 1, 0, 0])

        with self.assertRaises(ValueError):
            r.quaternion = np.eye(4)

    def test_components(self):

        r = rot.Rotation([0.1, 0.2, 0.3, 0.4])

        self.assertAlmostEqual(r.x, 0.1)
        self.assertAlmostEqual(r.y, 0.2)
        self.assertAlmostEqual(r.z, 0.3)
        self.assertAlmostEqual(r.w, 0.4)

        r.x, r.y, r.z, r.w = 0, 0, 0, 1

        self.assertEqual(r, rot.Rotation())

        np.testing.assert_array_equal(r.as_vec4(), [0, 0, 0, 1])
        self.assertEqual(r.as_vec4().dtype, np.float64)

    def test_length(self):

        self.assertEqual(rot.Rotation().length(), 1.0)
        self.assertAlmostEqual(rot.Rotation([1, 2, 3, 4]).length2(), 30.0, places=5)
        self.assertAlmostEqual(rot.Rotation.from_axis_angle(1.3, [1, 1, 0]).length(), 1.0, places=6)

    def test_from_axis_angle(self):

        r = rot.Rotation.from_axis_angle(np.pi / 2, 0, 0, 1)

        self.check_rotation(r, [0, 0, -SQRT_HALF, SQRT_HALF])

        self.assertEqual(r, rot.Rotation.from_axis_angle(np.pi / 2, [0, 0, 1]))

        np.testing.assert_array_almost_equal(r.to_matrix()[:3, :3] @ [1, 0, 0], [0, -1, 0])

    def test_make_rotate(self):

        r = rot.Rotation()

        r.make_rotate(1.0, [1, 2, 3])

        np.testing.assert_array_almost_equal(r.q, rot.axis_angle_to_quaternion(1.0, [1, 2, 3]))

        r.make_rotate(1.0, 1, 2, 3)

        np.testing.assert_array_almost_equal(r.q, rot.axis_angle_to_quaternion(1.0, [1, 2, 3]))

    def test_get_rotate(self):

        axis = np.array([1., 2., 3.])

        r = rot.Rotation.from_axis_angle(1.0, axis)

        angle, axis_out = r.get_rotate()

        self.assertAlmostEqual(angle, 1.0, places=5)
        np.testing.assert_array_almost_equal(axis_out, -axis / np.linalg.norm(axis))

        angle_c, x, y, z = r.get_rotate_components()

        self.assertEqual(angle, angle_c)
        self.assertEqual((axis_out[0], axis_out[1], axis_out[2]), (x, y, z))

    def test_from_vectors(self):

        self.check_rotation(rot.Rotation.from_vectors([1, 2, 3], [1, 2, 3]), [0, 0, 0, 1])

        vector = np.array([0.3, -2, 1])

        r = rot.Rotation.from_vectors(vector, -vector)

        np.testing.assert_array_almost_equal(r.to_matrix()[:3, :3] @ vector, -vector, decimal=5)

        r = rot.Rotation()
        r.make_rotate_between([1, 0, 0], [0, 1, 0])

        self.check_rotation(r, [0, 0, -SQRT_HALF, SQRT_HALF])

        np.testing.assert_array_almost_equal(np.array([1, 0, 0]) @ r.to_matrix()[:3, :3], [0, 1, 0])

    def test_matrix(self):

        self.assertEqual(rot.Rotation.from_matrix(np.eye(4)), rot.Rotation())
        self.assertEqual(rot.Rotation.from_matrix(np.eye(3)), rot.Rotation())

        np.testing.assert_array_equal(rot.Rotation().to_matrix(), np.eye(4))

        r = rot.Rotation.from_axis_angle(2.2, [-1, 0.5, 0.25])

        matrix = np.full((4, 4), 3.0, dtype=np.float32)

        res = r.get(matrix)

        self.assertIs(res, matrix)
        np.testing.assert_array_equal(matrix[3], [0, 0, 0, 1])
        np.testing.assert_array_equal(matrix[:3, 3], [0, 0, 0])

        r2 = rot.Rotation()
        r2.set(matrix)

        q_diff = min(np.abs(r2.q - r.q).max(), np.abs(r2.q + r.q).max())

        self.assertLess(q_diff, 1e-6)

    def test_matrix_element_accessor(self):

        class DictMatrix:

            def __init__(self):
                self.elements = {}

            def __getitem__(self, key):
                return self.elements[key]

            def __setitem__(self, key, value):
                self.elements[key] = value

        r = rot.Rotation.from_axis_angle(-0.8, [0.3, -2, 1])

        matrix = r.get(DictMatrix())

        r2 = rot.Rotation.from_matrix(matrix)

        q_diff = min(np.abs(r2.q - r.q).max(), np.abs(r2.q + r.q).max())

        self.assertLess(q_diff, 1e-6)

        r3 = rot.Rotation()
        r3.set(matrix)

        self.assertEqual(r3, r2)

    def test_slerp(self):

        start = rot.Rotation.from_axis_angle(0.3, [0, 0, 1])
        end = rot.Rotation.from_axis_angle(1.5, [0, 1, 1])

        self.assertEqual(rot.Rotation.interpolate(0, start, end), start)
        self.assertEqual(rot.Rotation.interpolate(1, start, end), end)

        r = rot.Rotation()
        r.slerp(0.5, start, start)

        np.testing.assert_array_almost_equal(r.q, start.q)

        r.slerp(0.5, start, end)

        np.testing.assert_array_almost_equal(r.q, rot.slerp(start.as_vec4(), end.as_vec4(), 0.5))
        self.assertEqual(r.quaternion.dtype, np.float32)

        # plain quaternion arrays are accepted as the end points
        r.slerp(1, [0, 0, 0, 1], [0.5, 0.5, 0.5, 0.5])

        self.check_rotation(r, [0.5, 0.5, 0.5, 0.5])

    def test_eq(self):

        r = rot.Rotation([0.5, 0.5, 0.5, 0.5])

        self.assertEqual(r, rot.Rotation([0.5, 0.5, 0.5, 0.5]))
        self.assertEqual(r, [0.5, 0.5, 0.5, 0.5])
        self.assertNotEqual(r, [0.5, 0.5, 0.5, -0.5])
        self.assertNotEqual(r, [1, 2, 3])
        self.assertNotEqual(r, None)

    def test_constructor_copies(self):

        a = rot.Rotation()
        b = rot.Rotation(a)

        b.x = 0.5
        b.quaternion[3] = 0.25

        self.assertEqual(a.x, 0.0)
        self.assertEqual(a.w, 1.0)
        self.assertEqual(b.x, 0.5)

        a.w = 2

        self.assertEqual(b.w, 0.25)

    def test_copy(self):

        r = rot.Rotation([0, 1, 0, 0])

        r2 = r.copy()

        self.assertEqual(r, r2)
        self.assertIsNot(r, r2)

        r2.w = 1

        self.assertEqual(r.w, 0)

    def test_repr(self):

        self.assertTrue(repr(rot.Rotation()).startswith('Rotation(array([0., 0., 0., 1.]'))
        self.assertEqual(str(rot.Rotation()), str(np.array([0, 0, 0, 1], dtype=np.float32)))
