# blochq/gates.py
import numpy as np
from .errors import UnknownGateError

def X(dtype=np.complex128) -> np.ndarray:
    return np.array([[0, 1],
                     [1, 0]], dtype=dtype)

def Y(dtype=np.complex128) -> np.ndarray:
    return np.array([[0, -1j],
                     [1j, 0]], dtype=dtype)

def Z(dtype=np.complex128) -> np.ndarray:
    return np.array([[1, 0],
                     [0, -1]], dtype=dtype)

def H(dtype=np.complex128) -> np.ndarray:
    s = 1.0 / np.sqrt(2.0)
    return np.array([[s, s],
                     [s, -s]], dtype=dtype)

def S(dtype=np.complex128) -> np.ndarray:
    return np.array([[1, 0],
                     [0, 1j]], dtype=dtype)

def T(dtype=np.complex128) -> np.ndarray:
    # e^{i pi/4} from cos/sin, not np.exp
    t = complex(np.cos(np.pi/4), np.sin(np.pi/4))
    return np.array([[1, 0],
                     [0, t]], dtype=dtype)

GATE_NAMES = ("X", "Y", "Z", "H", "S", "T")

_FACTORIES = {"X": X, "Y": Y, "Z": Z, "H": H, "S": S, "T": T}

GATES = {name: f() for name, f in _FACTORIES.items()}
for _U in GATES.values():
    _U.setflags(write=False)

def gate_name(name) -> str:
    """Canonical table key for name; raises UnknownGateError for anything else."""
    try:
        key = name.upper()
    except AttributeError:
        raise UnknownGateError(name) from None
    if key not in GATES:
        raise UnknownGateError(name)
    return key

def gate(name: str) -> np.ndarray:
    return GATES[gate_name(name)]

def dagger(U: np.ndarray) -> np.ndarray:
    return U.conj().T

def is_unitary(U: np.ndarray, tol=1e-12) -> bool:
    return np.allclose(U @ dagger(U), np.eye(U.shape[0]), atol=tol, rtol=0)
