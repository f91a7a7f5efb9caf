# blochq/bloch.py
import math
from typing import Tuple
from .complex_ops import abs2, arg
from .state import QubitState

def clamp(v, lo, hi):
    return lo if v < lo else hi if v > hi else v

def to_angles(state: QubitState) -> Tuple[float, float]:
    """Polar angle theta in [0, pi] and relative phase phi = arg(beta) - arg(alpha)."""
    # |alpha| can overshoot 1.0 by an ulp after normalization; acos would give NaN
    a = clamp(math.sqrt(abs2(state.alpha)), 0.0, 1.0)
    theta = 2.0 * math.acos(a)
    phi = arg(state.beta) - arg(state.alpha)
    return theta, phi

def to_bloch(state: QubitState) -> Tuple[float, float, float]:
    theta, phi = to_angles(state)
    x = math.sin(theta) * math.cos(phi)
    y = math.sin(theta) * math.sin(phi)
    z = math.cos(theta)
    return x, y, z
