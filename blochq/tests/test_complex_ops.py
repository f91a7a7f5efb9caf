# blochq/tests/test_complex_ops.py
import math
from blochq.complex_ops import Complex, abs2, add, arg, conj, expi, multiply, scale

def test_add():
    assert add(Complex(1.5, -2.0), Complex(0.25, 3.0)) == Complex(1.75, 1.0)

def test_multiply_matches_builtin_complex():
    a, b = Complex(1.5, -2.0), Complex(0.25, 3.0)
    z = a.to_complex() * b.to_complex()
    assert multiply(a, b) == Complex(z.real, z.imag)
    assert a * b == multiply(a, b)

def test_i_squared_is_minus_one():
    i = Complex(0.0, 1.0)
    assert multiply(i, i) == Complex(-1.0, 0.0)

def test_values_are_immutable():
    a = Complex(1.0, 2.0)
    b = a + Complex(1.0, 1.0)
    assert a == Complex(1.0, 2.0) and b == Complex(2.0, 3.0)

def test_helpers():
    a = Complex(3.0, 4.0)
    assert abs2(a) == 25.0
    assert conj(a) == Complex(3.0, -4.0)
    assert scale(a, 0.5) == Complex(1.5, 2.0)
    assert arg(Complex(0.0, 1.0)) == math.pi/2
    e = expi(math.pi/4)
    assert e.re == math.cos(math.pi/4) and e.im == math.sin(math.pi/4)
    assert Complex.from_complex(2-1j) == Complex(2.0, -1.0)
