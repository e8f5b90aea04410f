# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
Welcome to quatrot

quatrot provides a quaternion value type for representing 3D rotations along with the routines to convert it to and
from axis-angle pairs, pairs of aligned vectors, and rotation matrices, and to interpolate between two orientations.
Everything lives in the :mod:`quatrot.rotations` package.
"""

from quatrot import rotations
from quatrot.rotations import Rotation

__all__ = ['rotations', 'Rotation']
