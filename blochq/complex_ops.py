# blochq/complex_ops.py
import math
from dataclasses import dataclass

@dataclass(frozen=True)
class Complex:
    re: float = 0.0
    im: float = 0.0

    @staticmethod
    def from_complex(z) -> "Complex":
        z = complex(z)
        return Complex(float(z.real), float(z.imag))

    def to_complex(self) -> complex:
        return complex(self.re, self.im)

    def __add__(self, other: "Complex") -> "Complex":
        return add(self, other)

    def __mul__(self, other: "Complex") -> "Complex":
        return multiply(self, other)

ZERO = Complex(0.0, 0.0)
ONE = Complex(1.0, 0.0)

def add(a: Complex, b: Complex) -> Complex:
    return Complex(a.re + b.re, a.im + b.im)

def sub(a: Complex, b: Complex) -> Complex:
    return Complex(a.re - b.re, a.im - b.im)

def multiply(a: Complex, b: Complex) -> Complex:
    return Complex(a.re*b.re - a.im*b.im,
                   a.re*b.im + a.im*b.re)

def scale(a: Complex, k: float) -> Complex:
    return Complex(a.re * k, a.im * k)

def conj(a: Complex) -> Complex:
    return Complex(a.re, -a.im)

def abs2(a: Complex) -> float:
    """Squared magnitude |a|^2."""
    return a.re*a.re + a.im*a.im

def arg(a: Complex) -> float:
    return math.atan2(a.im, a.re)

def expi(angle: float) -> Complex:
    """Unit complex e^{i*angle}."""
    return Complex(math.cos(angle), math.sin(angle))
