"""
Numeric thresholds used to select the special case branches of the rotation routines.

These are tied to single precision rounding of the stored quaternion components and are not meant to be tuned by
users.
"""

COLLINEAR_EPSILON: float = 1e-5
"""
How close the cosine of the angle between two vectors must be to +1 or -1 before they are treated as coincident or
opposite when building a rotation between them.
"""

SLERP_EPSILON: float = 1e-5
"""
The minimum value of ``1 - cos(omega)`` for which slerp uses the spherical weights instead of a linear blend.
"""
