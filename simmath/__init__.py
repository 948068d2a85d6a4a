"""
SimMath - geometric primitives for simulation and robotics
"""

__version__ = "0.1.0"

import logging

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("SimMath")

# Import core modules
from simmath.src.vecmath import (
    Vector3r,
    Real,
    EPSILON,
    INF,
    NAN,
    asVector3r,
    vectorMin,
    vectorMax,
    vectorEqual,
    vectorToString,
)
from simmath.src.Object import Object
from simmath.src.Box import Box

__all__ = [
    "Box",
    "Object",
    "Vector3r",
    "Real",
    "EPSILON",
    "INF",
    "NAN",
    "asVector3r",
    "vectorMin",
    "vectorMax",
    "vectorEqual",
    "vectorToString",
]
