# blochq/apply_serial.py
import numpy as np
from .complex_ops import Complex, add, multiply
from .state import QubitState

def _entries(U2: np.ndarray):
    return [[Complex.from_complex(U2[r, c]) for c in range(2)] for r in range(2)]

def apply_single_qubit(state: QubitState, U2: np.ndarray) -> QubitState:
    """Matrix-vector product U2 @ (alpha, beta) using exact complex arithmetic."""
    assert U2.shape == (2,2)
    u = _entries(U2)
    a0, a1 = state.alpha, state.beta
    new_alpha = add(multiply(u[0][0], a0), multiply(u[0][1], a1))
    new_beta = add(multiply(u[1][0], a0), multiply(u[1][1], a1))
    return QubitState(new_alpha, new_beta)
