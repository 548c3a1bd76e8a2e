"""Configuration dataclasses and YAML loader for the Physarum CA simulation."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from pathlib import Path
import yaml


@dataclass(frozen=True)
class SensorConfig:
    width: int = 1                # footprint in pixels, informational only
    angle: float = 45.0           # degrees between forward and side sensors
    offset_distance: int = 9      # pixels from agent to sensor


@dataclass(frozen=True)
class SimulationConfig:
    """Parameters fixed for the lifetime of a Simulation."""
    width: int = 100
    height: int = 100
    step_size: int = 1
    deposition: int = 255
    cd_prob: float = 0.0          # direction change probability (inert)
    s_min: int = 50               # sensitivity threshold (inert)
    rotation_angle: float = 45.0
    sensor: SensorConfig = field(default_factory=SensorConfig)

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ValueError(
                f"Grid must be at least 1x1, got {self.width}x{self.height}")
        if not 0 <= self.deposition <= 255:
            raise ValueError(
                f"Deposition must be a byte value (0-255), got {self.deposition}")
        if not 0.0 <= self.cd_prob <= 1.0:
            raise ValueError(f"cd_prob must be in [0, 1], got {self.cd_prob}")
        if self.step_size < 0:
            raise ValueError(f"step_size must be non-negative, got {self.step_size}")
        if self.sensor.offset_distance < 0:
            raise ValueError(
                f"Sensor offset must be non-negative, got {self.sensor.offset_distance}")


@dataclass
class RunConfig:
    simulation: SimulationConfig
    steps: int = 100
    steps_per_frame: int = 5
    initial_density: float = 0.1
    random_trail: bool = True

    # Export flags (can be overridden by CLI)
    snapshot_enabled: bool = True
    gif_enabled: bool = False
    quiet: bool = False
    seed: Optional[int] = None
    out_dir: Path = field(default_factory=lambda: Path("./output"))

    def __post_init__(self):
        if not 0.0 <= self.initial_density <= 1.0:
            raise ValueError(
                f"Initial density must be in [0, 1], got {self.initial_density}")
        if self.steps < 0:
            raise ValueError(f"steps must be non-negative, got {self.steps}")
        if self.steps_per_frame < 1:
            raise ValueError(
                f"steps_per_frame must be at least 1, got {self.steps_per_frame}")


def default_run_config(size: int = 200) -> RunConfig:
    """Square grid with the stock parameters, as used when no file is given."""
    return RunConfig(simulation=SimulationConfig(width=size, height=size))


def _parse_sensor(sensor_raw: Dict[str, Any]) -> SensorConfig:
    """Parse sensor section from raw YAML data."""
    defaults = SensorConfig()
    return SensorConfig(
        width=sensor_raw.get('width', defaults.width),
        angle=float(sensor_raw.get('angle', defaults.angle)),
        offset_distance=sensor_raw.get('offset_distance', defaults.offset_distance)
    )


def _section(raw: Dict[str, Any], name: str) -> Dict[str, Any]:
    """Return a config section, treating an empty one as no overrides."""
    section = raw.get(name) or {}
    if not isinstance(section, dict):
        raise ValueError(f"Section '{name}' must be a mapping, got {section!r}")
    return section


def parse_config(raw: Dict[str, Any]) -> RunConfig:
    """Build a RunConfig from an already-parsed mapping."""
    raw = raw or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Configuration must be a mapping, got {type(raw).__name__}")
    defaults = SimulationConfig()

    grid_raw = _section(raw, 'grid')
    agents_raw = _section(raw, 'agents')

    simulation = SimulationConfig(
        width=grid_raw.get('width', defaults.width),
        height=grid_raw.get('height', defaults.height),
        step_size=agents_raw.get('step_size', defaults.step_size),
        deposition=agents_raw.get('deposition', defaults.deposition),
        cd_prob=float(agents_raw.get('cd_prob', defaults.cd_prob)),
        s_min=agents_raw.get('s_min', defaults.s_min),
        rotation_angle=float(agents_raw.get('rotation_angle', defaults.rotation_angle)),
        sensor=_parse_sensor(_section(raw, 'sensor'))
    )

    sim_raw = _section(raw, 'simulation')
    trail_raw = _section(raw, 'trail')

    # Parse export config (optional)
    export_raw = _section(raw, 'export')

    return RunConfig(
        simulation=simulation,
        steps=sim_raw.get('steps', 100),
        steps_per_frame=sim_raw.get('steps_per_frame', 5),
        initial_density=float(agents_raw.get('density', 0.1)),
        random_trail=trail_raw.get('random', True),
        snapshot_enabled=export_raw.get('snapshot', True),
        gif_enabled=export_raw.get('gif', False),
        seed=sim_raw.get('seed')
    )


def load_config(config_path: Path) -> RunConfig:
    """Load and validate YAML configuration file."""
    with open(config_path) as f:
        raw = yaml.safe_load(f)
    return parse_config(raw)
