#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import numpy as np

# Define precision
USE_QUAD_PRECISION = False

if USE_QUAD_PRECISION:
    try:
        # Try to use float128 if available
        Real = np.float128
    except AttributeError:
        # Fall back to float64 if float128 is not available
        Real = np.float64
else:
    Real = np.float64

# Mathematical constants
EPSILON = 1e-6
NAN = np.nan
INF = np.inf


def Vector3r(x=0.0, y=0.0, z=0.0):
    """Create a 3D real vector."""
    return np.array([x, y, z], dtype=Real)


def asVector3r(value):
    """Return a fresh Vector3r copy of any 3-component sequence."""
    v = np.array(value, dtype=Real).reshape(-1)
    if v.shape != (3,):
        raise ValueError(
            f"Vector3r requires 3 components, got {v.shape[0]}"
        )
    return v


def vectorMin(a, b):
    """Component-wise minimum of two vectors."""
    return np.minimum(a, b).astype(Real)


def vectorMax(a, b):
    """Component-wise maximum of two vectors."""
    return np.maximum(a, b).astype(Real)


def vectorEqual(a, b, tol=EPSILON):
    """Check component-wise equality within an absolute tolerance."""
    return bool(np.all(np.abs(np.asarray(a) - np.asarray(b)) <= tol))


def vectorToString(v):
    """Format a vector as space separated components."""
    return " ".join(f"{c:g}" for c in v)
