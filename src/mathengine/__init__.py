"""
mathengine — general-purpose numeric computation engine.

Scalar math, complex numbers, vectors, matrices, descriptive statistics,
probability distributions, pseudo-random sampling, discrete signal
transforms and single-predictor linear regression.

Public entry points:
- mathengine.core.math   : pure function libraries
- mathengine.bridge      : named-operation call boundary (invoke / call)
"""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
