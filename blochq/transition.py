# blochq/transition.py
import math
from typing import Iterator, Optional
from .complex_ops import Complex, abs2, add, scale, sub
from .state import QubitState

STEPS = 30
DEGENERATE_NORM = 1e-9

def _lerp(a: Complex, b: Complex, t: float) -> Complex:
    return add(a, scale(sub(b, a), t))

def interpolate(start: QubitState, target: QubitState, steps: int = STEPS) -> Iterator[QubitState]:
    """Yield steps+1 renormalized samples from start to target, both endpoints included.

    Linear interpolation between two unit vectors leaves the unit sphere at
    intermediate points, so every sample is renormalized by its joint norm.
    A sample at or near the zero vector (start ~ -target at t=0.5) has
    no meaningful direction and repeats the previous frame.
    """
    if steps < 1:
        raise ValueError(f"steps must be >= 1, got {steps}")
    prev = None
    for k in range(steps + 1):
        if k == steps:
            alpha, beta = target.alpha, target.beta
        else:
            t = k / steps
            alpha = _lerp(start.alpha, target.alpha, t)
            beta = _lerp(start.beta, target.beta, t)
        n = math.sqrt(abs2(alpha) + abs2(beta))
        if n < DEGENERATE_NORM:
            sample = prev if prev is not None else start
        else:
            sample = QubitState(Complex(alpha.re/n, alpha.im/n), Complex(beta.re/n, beta.im/n))
        prev = sample
        yield sample

class Transition:
    """One in-flight animation; advance() hands out one frame per call."""

    def __init__(self, start: QubitState, target: QubitState, steps: int = STEPS, label: str = ""):
        self.start = start
        self.target = target
        self.steps = steps
        self.label = label
        self.frame = 0
        self.current = start
        self._frames = interpolate(start, target, steps)
        self.done = False

    @property
    def total_frames(self) -> int:
        return self.steps + 1

    def advance(self) -> Optional[QubitState]:
        if self.done:
            return None
        try:
            self.current = next(self._frames)
        except StopIteration:
            self.done = True
            return None
        self.frame += 1
        if self.frame == self.total_frames:
            self.done = True
        return self.current

    def __iter__(self):
        while True:
            s = self.advance()
            if s is None:
                return
            yield s
