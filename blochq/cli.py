# blochq/cli.py
import argparse, logging, sys
from collections import Counter
import numpy as np
from .engine import BlochEngine, apply_gate, collapse, random_state
from .errors import InvalidStateError, UnknownGateError
from .formatting import format_bloch, format_percent, format_state, parse_complex
from .gates import GATE_NAMES
from .bloch import to_bloch
from .state import QubitState, custom_state, probabilities
from .transition import STEPS

def start_state(args) -> QubitState:
    if args.start is None:
        return QubitState.zero()
    a, b = args.start
    return custom_state(parse_complex(a), parse_complex(b))

def report(label, st: QubitState):
    p0, p1 = probabilities(st)
    print(f"  {label:<6} {format_state(st)}")
    print(f"         bloch={format_bloch(to_bloch(st))}  P0={format_percent(p0)}  P1={format_percent(p1)}")

# ---------------------------------------------------------------------
# subcommands

def cmd_apply(args):
    st = start_state(args)
    report("start", st)
    for name in args.gates:
        st = apply_gate(name, st, backend=args.backend)
        report(name.upper(), st)
    st.check_normalized()
    return 0

def cmd_measure(args):
    rng = np.random.default_rng(args.seed)
    prepared = start_state(args)
    for name in args.gates:
        prepared = apply_gate(name, prepared, backend=args.backend)
    report("state", prepared)
    counts = Counter()
    for _ in range(args.shots):
        basis, _ = collapse(prepared, rng)
        counts[basis] += 1
    print(f"[run] {args.shots} shots")
    for basis in (0, 1):
        freq = counts[basis] / args.shots if args.shots else 0.0
        print(f"  |{basis}⟩  count={counts[basis]:<8d} freq={format_percent(freq)}")
    return 0

def cmd_random(args):
    rng = np.random.default_rng(args.seed)
    for _ in range(args.count):
        report("random", random_state(rng))
    return 0

def cmd_show(args):
    eng = BlochEngine(seed=args.seed, steps=args.steps, backend=args.backend)
    from .view import BlochView
    BlochView(eng, interval=args.interval).show()
    return 0

# ---------------------------------------------------------------------
def build_parser():
    p = argparse.ArgumentParser(prog="blochq", description="Single-qubit Bloch sphere simulator")
    p.add_argument("-v", "--verbose", action="count", default=0)
    sub = p.add_subparsers(dest="cmd", required=True)

    def common(sp):
        sp.add_argument("--start", nargs=2, metavar=("ALPHA", "BETA"), default=None,
                        help="raw start amplitudes, e.g. --start 1 1j (normalized)")
        sp.add_argument("--backend", type=str, default="serial", choices=["serial", "numba"])

    p_show = sub.add_parser("show", help="interactive Bloch sphere window")
    p_show.add_argument("--seed", type=int, default=None)
    p_show.add_argument("--steps", type=int, default=STEPS)
    p_show.add_argument("--interval", type=int, default=16, help="ms per animation frame")
    p_show.add_argument("--backend", type=str, default="serial", choices=["serial", "numba"])
    p_show.set_defaults(func=cmd_show)

    p_apply = sub.add_parser("apply", help="apply a gate sequence and print each state")
    p_apply.add_argument("gates", nargs="*", type=str.upper, help="gate names: " + " ".join(GATE_NAMES))
    common(p_apply)
    p_apply.set_defaults(func=cmd_apply)

    p_measure = sub.add_parser("measure", help="measure a prepared state repeatedly")
    p_measure.add_argument("gates", nargs="*", type=str.upper, help="gate names: " + " ".join(GATE_NAMES))
    p_measure.add_argument("--shots", type=int, default=1000)
    p_measure.add_argument("--seed", type=int, default=None)
    common(p_measure)
    p_measure.set_defaults(func=cmd_measure)

    p_random = sub.add_parser("random", help="print random states")
    p_random.add_argument("--seed", type=int, default=None)
    p_random.add_argument("--count", type=int, default=1)
    p_random.set_defaults(func=cmd_random)
    return p

def main(argv=None):
    args = build_parser().parse_args(argv)
    level = logging.WARNING - 10*min(args.verbose, 2)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    try:
        return args.func(args)
    except (InvalidStateError, UnknownGateError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

if __name__ == "__main__":
    sys.exit(main())
