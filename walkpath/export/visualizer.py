"""Plotting and animation of walker paths."""

import matplotlib
matplotlib.use('Agg')  # Use non-interactive backend
import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle
from pathlib import Path
from typing import List, Optional, TYPE_CHECKING
from PIL import Image
import io

from ..model.walker import WalkerType, walker_type_name

if TYPE_CHECKING:
    from ..model.simulation import Simulation


class Visualizer:
    """
    Renders the paths of a simulation with matplotlib.

    Supports:
    - Single PNG snapshots of the full paths
    - Animated GIF of the paths growing step by step
    """

    # Path colour by speed tier
    COLORS = {
        WalkerType.SLOW: '#3498DB',        # Blue
        WalkerType.NORMAL: '#27AE60',      # Green
        WalkerType.FAST: '#F39C12',        # Orange
        WalkerType.SUPERHUMAN: '#E74C3C',  # Red
    }
    BOUNDS_COLOR = '#2C3E50'

    def __init__(self, simulation: "Simulation"):
        self.simulation = simulation
        self.frames: List[Image.Image] = []

    def _create_figure(self, upto_step: Optional[int] = None) -> plt.Figure:
        """Figure of all paths truncated after ``upto_step`` (None = full)."""
        fig, ax = plt.subplots(figsize=(8, 8))
        bounds = self.simulation.get_bounds()

        for walker in self.simulation.get_walkers():
            coords = walker.get_path().to_array()
            if upto_step is not None:
                coords = coords[:upto_step + 1]
            if len(coords) == 0:
                continue
            color = self.COLORS[walker.get_walker_type()]
            ax.plot(coords[:, 0], coords[:, 1], '-', color=color,
                    linewidth=0.8, alpha=0.8)
            ax.plot(coords[0, 0], coords[0, 1], 'o', color=color,
                    markersize=5, markeredgecolor='black', markeredgewidth=0.5)
            ax.plot(coords[-1, 0], coords[-1, 1], 's', color=color,
                    markersize=5, markeredgecolor='black', markeredgewidth=0.5)

        # Bounding box of the full paths
        ax.add_patch(Rectangle((bounds.min_x, bounds.min_y),
                               bounds.size.x, bounds.size.y,
                               fill=False, linestyle='--',
                               edgecolor=self.BOUNDS_COLOR, linewidth=1.0))

        # Fixed limits so GIF frames share one frame of reference
        margin = max(bounds.size.x, bounds.size.y, 1.0) * 0.05
        ax.set_xlim(bounds.min_x - margin, bounds.max_x + margin)
        ax.set_ylim(bounds.min_y - margin, bounds.max_y + margin)
        ax.set_aspect('equal')

        step_label = self.simulation.get_total_steps() if upto_step is None else upto_step
        ax.set_title(f'Step {step_label} | Walkers: {self.simulation.num_walkers()}')
        ax.set_xlabel('X')
        ax.set_ylabel('Y')

        legend_elements = [
            plt.Line2D([0], [0], color=color, label=walker_type_name(walker_type))
            for walker_type, color in self.COLORS.items()
        ]
        ax.legend(handles=legend_elements, loc='upper right', fontsize=8)

        plt.tight_layout()
        return fig

    def buffer_frame(self, upto_step: Optional[int] = None) -> None:
        """Store frame for GIF generation."""
        fig = self._create_figure(upto_step)

        # Convert to PIL Image
        buf = io.BytesIO()
        fig.savefig(buf, format='png', dpi=80)
        buf.seek(0)
        img = Image.open(buf).copy()
        self.frames.append(img)
        buf.close()
        plt.close(fig)

    def buffer_steps(self, every: int = 5) -> None:
        """Buffer one frame every ``every`` steps, always ending on the last."""
        total = self.simulation.get_total_steps()
        steps = list(range(0, total + 1, max(1, every)))
        if steps[-1] != total:
            steps.append(total)
        for step in steps:
            self.buffer_frame(step)

    def save_snapshot(self, output_path: Path) -> None:
        """Save single PNG image of the full paths."""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig = self._create_figure()
        fig.savefig(output_path, dpi=150, bbox_inches='tight')
        plt.close(fig)

    def generate_gif(self, output_path: Path, fps: int = 10) -> None:
        """Compile buffered frames into animated GIF."""
        if not self.frames:
            return

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        duration = int(1000 / fps)  # milliseconds per frame

        self.frames[0].save(
            output_path,
            save_all=True,
            append_images=self.frames[1:],
            duration=duration,
            loop=0
        )

    def clear_frames(self) -> None:
        self.frames.clear()
