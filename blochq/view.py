# blochq/view.py
import logging
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation
from matplotlib.widgets import Button, TextBox
from mpl_toolkits.mplot3d import Axes3D  # noqa: F401  (registers the 3d projection)

from .engine import BlochEngine, Measurement, Snapshot
from .errors import InvalidStateError
from .formatting import format_bloch, format_percent, format_state, parse_complex
from .gates import GATE_NAMES

logger = logging.getLogger(__name__)

BG = "#0a0a0a"
FG = "#dddddd"
AXIS_COLORS = {"X": "#ff0000", "Y": "#00ff00", "Z": "#0088ff"}
ARROW_COLOR = "#ffff00"
SPHERE_COLOR = "#4444ff"

class BlochView:
    """Matplotlib front end: Bloch sphere, state readout and gate buttons.

    The view never touches the qubit state directly. Button callbacks turn
    into engine requests, and the FuncAnimation timer calls engine.step()
    once per frame; the engine pushes a Snapshot back after every frame.
    """

    def __init__(self, engine: BlochEngine, interval: int = 16):
        self.engine = engine
        self.interval = interval
        self.anim = None
        self._arrow = None

        self.fig = plt.figure(figsize=(12, 7), facecolor=BG)
        self.fig.suptitle("Single-qubit Bloch sphere", color="#00ddff", fontsize=16)
        gs = self.fig.add_gridspec(3, 2, width_ratios=[3, 2], height_ratios=[4, 2, 1],
                                   left=0.03, right=0.97, top=0.92, bottom=0.05, hspace=0.35)
        self.ax = self.fig.add_subplot(gs[:2, 0], projection="3d")
        self.ax_bars = self.fig.add_subplot(gs[0, 1])
        self.ax_info = self.fig.add_subplot(gs[1, 1])
        self._draw_sphere()
        self._draw_bars()
        self._draw_info()
        self._build_controls()

        engine.subscribe(self.render)
        engine.subscribe_measurement(self.announce)
        self.render(engine.snapshot())

    # ---------- static scene ----------

    def _draw_sphere(self):
        ax = self.ax
        ax.set_facecolor(BG)
        u = np.linspace(0, 2*np.pi, 32)
        v = np.linspace(0, np.pi, 16)
        xs = np.outer(np.cos(u), np.sin(v))
        ys = np.outer(np.sin(u), np.sin(v))
        zs = np.outer(np.ones_like(u), np.cos(v))
        ax.plot_wireframe(xs, ys, zs, color=SPHERE_COLOR, alpha=0.3, linewidth=0.5)

        for name, (dx, dy, dz) in (("X", (1, 0, 0)), ("Y", (0, 1, 0)), ("Z", (0, 0, 1))):
            c = AXIS_COLORS[name]
            ax.plot([-dx, dx], [-dy, dy], [-dz, dz], color=c, linewidth=1)
            ax.text(1.2*dx, 1.2*dy, 1.2*dz, name, color=c, fontsize=12, fontweight="bold")
        ax.text(0, 0, 1.05, "|0⟩", color="#00ddff", fontsize=12)
        ax.text(0, 0, -1.15, "|1⟩", color="#ff00ff", fontsize=12)

        ax.set_xlim([-1.2, 1.2])
        ax.set_ylim([-1.2, 1.2])
        ax.set_zlim([-1.2, 1.2])
        ax.set_box_aspect([1, 1, 1])
        ax.set_axis_off()
        ax.view_init(elev=25, azim=45)

    def _draw_bars(self):
        ax = self.ax_bars
        ax.set_facecolor(BG)
        ax.set_xlim(0, 1)
        ax.set_ylim(-0.5, 1.5)
        ax.set_yticks([1, 0])
        ax.set_yticklabels(["P(|0⟩)", "P(|1⟩)"], color=FG)
        ax.tick_params(axis="x", colors=FG)
        ax.set_title("Measurement probabilities", color=FG)
        self.bars = ax.barh([1, 0], [1.0, 0.0], color=["#00ddff", "#ff00ff"], height=0.6)
        self.bar_labels = [ax.text(1.0, 1, "", color=FG, va="center", ha="right"),
                           ax.text(1.0, 0, "", color=FG, va="center", ha="right")]

    def _draw_info(self):
        ax = self.ax_info
        ax.set_facecolor(BG)
        ax.set_axis_off()
        self.txt_state = ax.text(0.0, 0.85, "", color=FG, fontsize=12, family="monospace")
        self.txt_bloch = ax.text(0.0, 0.6, "", color=FG, fontsize=10, family="monospace")
        self.txt_action = ax.text(0.0, 0.35, "", color="#ffff00", fontsize=10)
        self.txt_measure = ax.text(0.0, 0.1, "", color="#ff8800", fontsize=11, fontweight="bold")

    def _build_controls(self):
        self.buttons = {}
        x0, w, gap = 0.03, 0.05, 0.008
        for i, name in enumerate(GATE_NAMES):
            bax = self.fig.add_axes([x0 + i*(w + gap), 0.04, w, 0.05])
            btn = Button(bax, name, color="#1a1a3a", hovercolor="#333366")
            btn.label.set_color("#00ffff")
            btn.on_clicked(lambda _evt, g=name: self.on_gate(g))
            self.buttons[name] = btn

        x = x0 + len(GATE_NAMES)*(w + gap) + 0.02
        for label, cb in (("Reset", self.on_reset), ("Random", self.on_random), ("Measure", self.on_measure)):
            bax = self.fig.add_axes([x, 0.04, 0.07, 0.05])
            btn = Button(bax, label, color="#1a1a3a", hovercolor="#333366")
            btn.label.set_color("white")
            btn.on_clicked(lambda _evt, f=cb: f())
            self.buttons[label] = btn
            x += 0.075

        self.box_alpha = TextBox(self.fig.add_axes([0.66, 0.12, 0.1, 0.04]), "α ", initial="1")
        self.box_beta = TextBox(self.fig.add_axes([0.66, 0.06, 0.1, 0.04]), "β ", initial="0")
        bax = self.fig.add_axes([0.8, 0.06, 0.1, 0.1])
        btn = Button(bax, "Set state", color="#1a1a3a", hovercolor="#333366")
        btn.label.set_color("white")
        btn.on_clicked(lambda _evt: self.on_custom(self.box_alpha.text, self.box_beta.text))
        self.buttons["Set state"] = btn

    # ---------- engine -> view ----------

    def render(self, snap: Snapshot):
        x, y, z = snap.bloch
        if self._arrow is not None:
            self._arrow.remove()
        self._arrow = self.ax.quiver(0, 0, 0, x, y, z, color=ARROW_COLOR, linewidth=3,
                                     arrow_length_ratio=0.15)

        p0, p1 = snap.probabilities
        for bar, p in zip(self.bars, (p0, p1)):
            bar.set_width(p)
        self.bar_labels[0].set_text(format_percent(p0))
        self.bar_labels[1].set_text(format_percent(p1))

        self.txt_state.set_text(format_state(snap.state))
        self.txt_bloch.set_text("Bloch " + format_bloch(snap.bloch))
        if self.engine.last_action:
            self.txt_action.set_text(f"Last action: {self.engine.last_action}")

    def announce(self, m: Measurement):
        self.txt_measure.set_text(f"Measured |{m.basis}⟩ with probability {format_percent(m.probability)}")

    # ---------- view -> engine ----------

    def on_gate(self, name: str):
        if self.engine.request_gate(name) is not None:
            self.txt_measure.set_text("")

    def on_reset(self):
        if self.engine.request_reset() is not None:
            self.txt_measure.set_text("")

    def on_random(self):
        if self.engine.request_random() is not None:
            self.txt_measure.set_text("")

    def on_measure(self):
        self.engine.request_measure()

    def on_custom(self, alpha_text, beta_text):
        alpha = parse_complex(alpha_text)
        beta = parse_complex(beta_text)
        try:
            if self.engine.request_custom(alpha, beta) is not None:
                self.txt_measure.set_text("")
        except InvalidStateError as e:
            logger.warning("Custom state rejected: %s", e)
            self.txt_measure.set_text("Invalid state: α and β cannot both be 0")

    # ---------- frame loop ----------

    def tick(self, _frame=None):
        self.engine.step()
        return ()

    def start(self):
        self.anim = FuncAnimation(self.fig, self.tick, frames=None, interval=self.interval,
                                  blit=False, cache_frame_data=False)
        return self.anim

    def show(self):
        self.start()
        plt.show()
