# domain/geometry/constants.py
"""Constants for geometric calculations."""

# Default tolerance for approximate floating-point comparisons
EPSILON = 1e-5

# Homogeneous w component of points and vectors
POINT_W = 1.0
VECTOR_W = 0.0
