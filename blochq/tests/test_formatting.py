# blochq/tests/test_formatting.py
import pytest
from blochq.complex_ops import Complex
from blochq.formatting import (format_bloch, format_complex, format_percent, format_state,
                               parse_complex)
from blochq.state import QubitState

@pytest.mark.parametrize("c, text", [
    (Complex(0.0, 0.0), "0"),
    (Complex(0.00005, -0.00002), "0"),
    (Complex(0.7071067, 0.0), "0.707"),
    (Complex(0.0, -0.5), "-0.500i"),
    (Complex(0.5, 0.5), "0.500 + 0.500i"),
    (Complex(-0.6, -0.8), "-0.600 - 0.800i"),
])
def test_format_complex(c, text):
    assert format_complex(c) == text

def test_format_state():
    assert format_state(QubitState.zero()) == "|ψ⟩ = (1.000)|0⟩ + (0)|1⟩"

def test_format_percent_single_rule():
    assert format_percent(0.5) == "50.0%"
    assert format_percent(1/3) == "33.3%"
    assert format_percent(0.0) == "0.0%"

def test_format_bloch():
    assert format_bloch((0.0, 0.0, -1.0)) == "(+0.000, +0.000, -1.000)"

@pytest.mark.parametrize("text, value", [
    ("0.6", Complex(0.6, 0.0)),
    ("0.8i", Complex(0.0, 0.8)),
    ("0.6+0.8j", Complex(0.6, 0.8)),
    ("1 - 2i", Complex(1.0, -2.0)),
    ("-i", Complex(0.0, -1.0)),
    ("", Complex(0.0, 0.0)),
    ("abc", Complex(0.0, 0.0)),
    ("nan", Complex(0.0, 0.0)),
    (None, Complex(0.0, 0.0)),
])
def test_parse_complex_sanitizes(text, value):
    assert parse_complex(text) == value
