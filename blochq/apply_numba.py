# blochq/apply_numba.py
import numpy as np
from numba import njit
from .state import QubitState

# ---------- low-level kernel (Numba JIT) ----------

# no fastmath: keeps the same operation order as complex_ops.multiply
@njit
def _single_qubit_kernel(psi, U2):
    a0 = psi[0]
    a1 = psi[1]
    psi[0] = U2[0,0]*a0 + U2[0,1]*a1
    psi[1] = U2[1,0]*a0 + U2[1,1]*a1

# ---------- user-facing apply helper ----------

def apply_single_qubit(state: QubitState, U2: np.ndarray) -> QubitState:
    psi = state.as_numpy()
    _single_qubit_kernel(psi, np.array(U2, dtype=psi.dtype))
    return QubitState.from_numpy(psi)
