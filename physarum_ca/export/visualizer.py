"""Visualization and export for the Physarum CA simulation."""

import matplotlib
matplotlib.use('Agg')  # Use non-interactive backend
import matplotlib.pyplot as plt
from pathlib import Path
from typing import List, TYPE_CHECKING
from PIL import Image

if TYPE_CHECKING:
    from ..model.state import SimulationState


class Visualizer:
    """
    Generates visual outputs from rendered simulation buffers.

    Supports:
    - Single PNG snapshots (agents and trail side by side)
    - Animated GIF compilation
    """

    # Agent overlay tint on GIF frames
    AGENT_COLOR = (243, 156, 18)

    def __init__(self, grid_width: int, grid_height: int, scale: int = 2):
        self.width = grid_width
        self.height = grid_height
        self.scale = scale
        self.frames: List[Image.Image] = []

    def _create_figure(self, state: "SimulationState") -> plt.Figure:
        """Create matplotlib figure for state visualization."""
        aspect = self.width / self.height
        fig_height = 5
        fig, (ax_agents, ax_trail) = plt.subplots(
            1, 2, figsize=(max(8, 2 * fig_height * aspect), fig_height))

        ax_agents.imshow(state.agents, interpolation='nearest')
        ax_agents.set_title(f'Agents ({state.live_agents} live)')

        ax_trail.imshow(state.trail, interpolation='nearest')
        ax_trail.set_title(
            f'Trail (mean {state.metrics.get("trail_mean", 0.0):.1f})')

        for ax in (ax_agents, ax_trail):
            ax.set_xticks([])
            ax.set_yticks([])

        fig.suptitle(f'Tick {state.tick}')
        plt.tight_layout()
        return fig

    def composite(self, state: "SimulationState") -> Image.Image:
        """Trail image with agents drawn on top."""
        rgb = state.trail[..., :3].copy()
        occupied = state.agents[..., 0] > 0
        rgb[occupied] = self.AGENT_COLOR
        img = Image.fromarray(rgb)
        if self.scale > 1:
            img = img.resize((self.width * self.scale, self.height * self.scale),
                             Image.Resampling.NEAREST)
        return img

    def buffer_frame(self, state: "SimulationState") -> None:
        """Store frame for GIF generation."""
        self.frames.append(self.composite(state))

    def save_snapshot(self, state: "SimulationState", output_path: Path) -> None:
        """Save single PNG image of current state."""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig = self._create_figure(state)
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
        """Clear buffered frames."""
        self.frames.clear()
