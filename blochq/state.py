# blochq/state.py
import math
from dataclasses import dataclass
from typing import Tuple
import numpy as np
from .complex_ops import Complex, ONE, ZERO, abs2, scale
from .errors import InvalidStateError

NORM_TOL = 1e-6

@dataclass(frozen=True)
class QubitState:
    alpha: Complex  # amplitude of |0>
    beta: Complex   # amplitude of |1>

    @staticmethod
    def zero() -> "QubitState":
        return QubitState(ONE, ZERO)

    @staticmethod
    def one() -> "QubitState":
        return QubitState(ZERO, ONE)

    @staticmethod
    def from_numpy(psi: np.ndarray) -> "QubitState":
        if psi.shape != (2,):
            raise ValueError(f"Expected shape (2,), got {psi.shape}")
        return QubitState(Complex.from_complex(psi[0]), Complex.from_complex(psi[1]))

    def as_numpy(self, dtype=np.complex128) -> np.ndarray:
        return np.array([self.alpha.to_complex(), self.beta.to_complex()], dtype=dtype)

    def norm2(self) -> float:
        return abs2(self.alpha) + abs2(self.beta)

    def check_normalized(self, tol=NORM_TOL):
        n2 = self.norm2()
        if not (abs(1.0 - n2) <= tol):
            raise AssertionError(f"Normalization failed: ||psi||^2={n2}")

    def normalized(self) -> "QubitState":
        n = math.sqrt(self.norm2())
        if n == 0.0:
            raise InvalidStateError("State vector has zero norm")
        return QubitState(scale(self.alpha, 1.0 / n), scale(self.beta, 1.0 / n))

def probabilities(state: QubitState) -> Tuple[float, float]:
    """Born-rule probabilities (p0, p1) of measuring |0> and |1>."""
    return abs2(state.alpha), abs2(state.beta)

def custom_state(alpha: Complex, beta: Complex) -> QubitState:
    """Normalize a raw amplitude pair. Raises InvalidStateError for the zero vector."""
    return QubitState(alpha, beta).normalized()
