# blochq/engine.py
import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple
import numpy as np
from . import gates as G
from .bloch import to_bloch
from .complex_ops import Complex, expi, scale
from .state import QubitState, probabilities, custom_state
from .transition import STEPS, Transition

logger = logging.getLogger(__name__)

def apply_gate(name: str, state: QubitState, backend: str = "serial") -> QubitState:
    """Return gate(name) @ state. Gates are unitary, so no renormalization here."""
    U = G.gate(name)
    if backend == "serial":
        from .apply_serial import apply_single_qubit
    elif backend == "numba":
        try:
            from .apply_numba import apply_single_qubit
        except Exception as e:
            raise RuntimeError("Numba backend not available. Did you `pip install numba`?") from e
    else:
        raise NotImplementedError(f"Unknown backend: {backend}")
    return apply_single_qubit(state, U)

def collapse(state: QubitState, rng: np.random.Generator) -> Tuple[int, QubitState]:
    """Projective measurement in the computational basis.

    A single uniform draw r in [0, 1) picks |0> when r < p0, else |1>. The
    post-measurement state is the basis vector itself, not a perturbation.
    """
    p0, _ = probabilities(state)
    r = rng.random()
    if r < p0:
        return 0, QubitState.zero()
    return 1, QubitState.one()

def random_state(rng: np.random.Generator) -> QubitState:
    # theta is uniform in [0, pi], which over-weights the poles; kept on purpose
    theta = rng.uniform(0.0, math.pi)
    phi = rng.uniform(0.0, 2*math.pi)
    gamma = rng.uniform(0.0, 2*math.pi)
    alpha = scale(expi(gamma), math.cos(theta/2))
    beta = scale(expi(phi + gamma), math.sin(theta/2))
    return QubitState(alpha, beta)

class EngineStatus(Enum):
    IDLE = "idle"
    TRANSITIONING = "transitioning"

@dataclass(frozen=True)
class Snapshot:
    state: QubitState
    bloch: Tuple[float, float, float]
    probabilities: Tuple[float, float]

    @staticmethod
    def of(state: QubitState) -> "Snapshot":
        return Snapshot(state, to_bloch(state), probabilities(state))

@dataclass(frozen=True)
class Measurement:
    basis: int
    probability: float  # probability of the measured outcome before collapse

class BlochEngine:
    """Owns the single qubit state and serializes requests against it.

    Gate, reset, custom and random requests start a Transition that the
    presentation layer drives one frame at a time through step(). Requests
    that arrive while a transition is running are dropped.
    """

    def __init__(self, state: Optional[QubitState] = None, rng: Optional[np.random.Generator] = None,
                 seed=None, steps: int = STEPS, backend: str = "serial"):
        self.state = state if state is not None else QubitState.zero()
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.steps = steps
        self.backend = backend
        self.last_action: Optional[str] = None
        self._transition: Optional[Transition] = None
        self._listeners: List[Callable[[Snapshot], None]] = []
        self._measure_listeners: List[Callable[[Measurement], None]] = []

    # ---------- queries ----------

    @property
    def status(self) -> EngineStatus:
        return EngineStatus.IDLE if self._transition is None else EngineStatus.TRANSITIONING

    @property
    def busy(self) -> bool:
        return self._transition is not None

    @property
    def transition(self) -> Optional[Transition]:
        return self._transition

    def snapshot(self) -> Snapshot:
        return Snapshot.of(self.state)

    def probabilities(self) -> Tuple[float, float]:
        return probabilities(self.state)

    def bloch(self) -> Tuple[float, float, float]:
        return to_bloch(self.state)

    # ---------- observers ----------

    def subscribe(self, callback: Callable[[Snapshot], None]):
        self._listeners.append(callback)
        return callback

    def subscribe_measurement(self, callback: Callable[[Measurement], None]):
        self._measure_listeners.append(callback)
        return callback

    def _emit(self):
        snap = self.snapshot()
        for cb in self._listeners:
            cb(snap)

    # ---------- requests ----------

    def _begin(self, target: QubitState, label: str) -> Optional[Transition]:
        if self.busy:
            logger.debug("Rejected %s: transition in progress", label)
            return None
        self.last_action = label
        self._transition = Transition(self.state, target, self.steps, label=label)
        logger.debug("Transition %s started (%d frames)", label, self._transition.total_frames)
        return self._transition

    def request_gate(self, name: str) -> Optional[Transition]:
        label = G.gate_name(name)
        if self.busy:
            logger.debug("Rejected gate %s: transition in progress", label)
            return None
        target = apply_gate(label, self.state, backend=self.backend)
        return self._begin(target, label)

    def request_reset(self) -> Optional[Transition]:
        return self._begin(QubitState.zero(), "Reset")

    def request_custom(self, alpha: Complex, beta: Complex) -> Optional[Transition]:
        target = custom_state(alpha, beta)
        return self._begin(target, "Custom")

    def request_random(self) -> Optional[Transition]:
        if self.busy:
            logger.debug("Rejected Random: transition in progress")
            return None
        return self._begin(random_state(self.rng), "Random")

    def request_measure(self) -> Optional[Measurement]:
        if self.busy:
            logger.debug("Rejected Measure: transition in progress")
            return None
        p0, p1 = probabilities(self.state)
        basis, self.state = collapse(self.state, self.rng)
        m = Measurement(basis, p0 if basis == 0 else p1)
        self.last_action = "Measure"
        logger.info("Measured |%d> (p=%.4f)", m.basis, m.probability)
        self._emit()
        for cb in self._measure_listeners:
            cb(m)
        return m

    # ---------- frame driving ----------

    def step(self) -> bool:
        """Advance the running transition by one frame. Returns True while frames remain."""
        tr = self._transition
        if tr is None:
            return False
        s = tr.advance()
        if s is not None:
            self.state = s
            self._emit()
        if tr.done:
            self._transition = None
            logger.debug("Transition %s finished", tr.label)
            return False
        return True

    def run_to_completion(self, check_norm=True, check_norm_tol=None) -> QubitState:
        while self.step():
            pass
        if check_norm:
            if check_norm_tol is None:
                self.state.check_normalized()
            else:
                self.state.check_normalized(tol=check_norm_tol)
        return self.state
