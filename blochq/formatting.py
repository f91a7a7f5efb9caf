# blochq/formatting.py
import math
from .complex_ops import Complex
from .state import QubitState

EPS = 1e-4

def format_complex(c: Complex, digits: int = 3) -> str:
    """Compact a+bi rendering; parts below EPS print as 0."""
    re = 0.0 if abs(c.re) < EPS else c.re
    im = 0.0 if abs(c.im) < EPS else c.im
    if re == 0 and im == 0:
        return "0"
    if im == 0:
        return f"{re:.{digits}f}"
    if re == 0:
        return f"{im:.{digits}f}i"
    sign = "+" if im >= 0 else "-"
    return f"{re:.{digits}f} {sign} {abs(im):.{digits}f}i"

def format_state(state: QubitState) -> str:
    return f"|ψ⟩ = ({format_complex(state.alpha)})|0⟩ + ({format_complex(state.beta)})|1⟩"

def format_percent(p: float) -> str:
    # one rule for the bars and the measurement announcement
    return f"{p * 100:.1f}%"

def format_bloch(xyz) -> str:
    x, y, z = xyz
    return f"({x:+.3f}, {y:+.3f}, {z:+.3f})"

def parse_complex(text) -> Complex:
    """Parse '0.6', '0.8i', '0.6+0.8j', '1 - 2i' etc. Malformed input becomes 0."""
    s = str(text).strip().replace(" ", "").replace("i", "j")
    if not s:
        return Complex(0.0, 0.0)
    try:
        z = complex(s)
    except ValueError:
        return Complex(0.0, 0.0)
    if not (math.isfinite(z.real) and math.isfinite(z.imag)):
        return Complex(0.0, 0.0)
    return Complex.from_complex(z)
