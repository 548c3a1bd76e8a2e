"""Summary report generation for the Physarum CA simulation."""

from typing import Optional, TYPE_CHECKING
from pathlib import Path

if TYPE_CHECKING:
    from ..model.state import SimulationState


class Reporter:
    """Generates summary statistics and formatted text report."""

    def __init__(self, config_path: Optional[str], seed: Optional[int]):
        self.config_path = config_path
        self.seed = seed
        self.initial_agents: Optional[int] = None
        self.peak_coverage = 0.0
        self.min_trail_mean: Optional[float] = None
        self.max_trail_mean: Optional[float] = None

    def update(self, state: "SimulationState") -> None:
        """Accumulate metrics per frame."""
        if self.initial_agents is None:
            self.initial_agents = state.live_agents

        coverage = state.metrics.get('trail_coverage', 0.0)
        if coverage > self.peak_coverage:
            self.peak_coverage = coverage

        trail_mean = state.metrics.get('trail_mean', 0.0)
        if self.min_trail_mean is None or trail_mean < self.min_trail_mean:
            self.min_trail_mean = trail_mean
        if self.max_trail_mean is None or trail_mean > self.max_trail_mean:
            self.max_trail_mean = trail_mean

    def generate_summary(self, final_state: "SimulationState",
                         output_dir: Path,
                         snapshot_enabled: bool,
                         gif_enabled: bool) -> str:
        """Returns formatted text report."""
        metrics = final_state.metrics
        initial = self.initial_agents if self.initial_agents is not None \
            else final_state.live_agents
        low = self.min_trail_mean if self.min_trail_mean is not None \
            else metrics.get('trail_mean', 0.0)
        high = self.max_trail_mean if self.max_trail_mean is not None \
            else metrics.get('trail_mean', 0.0)

        lines = [
            "",
            "=" * 80,
            "                      PHYSARUM CA SIMULATION REPORT",
            "=" * 80,
            f"Configuration: {self.config_path or '(defaults)'}",
            f"Random Seed: {self.seed if self.seed is not None else 'None (random)'}",
            "",
            "SIMULATION METRICS",
            "-" * 40,
            f"Grid:                  {final_state.width}x{final_state.height}",
            f"Total Ticks:           {final_state.tick}",
            f"Live Agents:           {final_state.live_agents} (initial {initial})",
            f"Agent Density:         {metrics.get('density', 0.0):.4f} agents/cell",
            f"Mean Trail:            {metrics.get('trail_mean', 0.0):.2f}",
            f"Trail Mean Range:      {low:.2f} - {high:.2f}",
            f"Trail Coverage:        {metrics.get('trail_coverage', 0.0):.1%}"
            f" (peak {self.peak_coverage:.1%})",
            "",
            "OUTPUT FILES",
            "-" * 40,
        ]

        if snapshot_enabled:
            lines.append(f"Snapshot:   {output_dir / 'final_state.png'}")
        else:
            lines.append("Snapshot:   (disabled)")

        if gif_enabled:
            lines.append(f"Animation:  {output_dir / 'simulation.gif'}")
        else:
            lines.append("Animation:  (disabled)")

        lines.append("=" * 80)

        return "\n".join(lines)
