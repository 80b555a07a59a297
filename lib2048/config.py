"""
Engine Configuration.

Defines the configuration dataclass for boards and its YAML I/O.

Defaults follow the classic game: a 4x4 grid, two starting tiles, a 2048
tile (log2 value 11) wins, and one spawn in five is a "4".
"""

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional

import yaml


DEFAULT_SIZE = 4
DEFAULT_WIN_VALUE = 11
DEFAULT_INITIAL_POPULATE_COUNT = 2
DEFAULT_FOUR_PROBABILITY = 0.2


@dataclass
class EngineConfig:
    """Configuration for a Board.

    Attributes:
        size: Side length of the square grid
        win_value: log2 tile value that wins the game (11 = 2048)
        initial_populate_count: Random tiles spawned by reset()
        four_probability: Chance that a spawned tile is a "4" instead of a "2"
        seed: Optional seed for the board's random source
    """
    size: int = DEFAULT_SIZE
    win_value: int = DEFAULT_WIN_VALUE
    initial_populate_count: int = DEFAULT_INITIAL_POPULATE_COUNT
    four_probability: float = DEFAULT_FOUR_PROBABILITY
    seed: Optional[int] = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.size < 2:
            raise ValueError("size must be at least 2")
        if self.win_value <= 0:
            raise ValueError("win_value must be positive")
        if self.initial_populate_count < 0:
            raise ValueError("initial_populate_count must be non-negative")
        if self.initial_populate_count > self.size * self.size:
            raise ValueError(
                f"initial_populate_count ({self.initial_populate_count}) "
                f"exceeds the number of cells ({self.size * self.size})"
            )
        if not 0.0 <= self.four_probability <= 1.0:
            raise ValueError("four_probability must be between 0 and 1")


def load_config(config_path: str) -> EngineConfig:
    """Load engine configuration from YAML file.

    Keys missing from the file take their defaults. An ``engine`` top-level
    section is accepted as well as a flat mapping.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        EngineConfig built from the file

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config is empty or invalid
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, 'r') as f:
        raw = yaml.safe_load(f)

    if raw is None:
        raise ValueError("Config file is empty")
    if not isinstance(raw, dict):
        raise ValueError("Config file must contain a mapping")

    settings = raw.get("engine", raw)
    unknown = set(settings) - set(EngineConfig.__dataclass_fields__)
    if unknown:
        raise ValueError(f"Unknown config keys: {sorted(unknown)}")

    return EngineConfig(
        size=settings.get("size", DEFAULT_SIZE),
        win_value=settings.get("win_value", DEFAULT_WIN_VALUE),
        initial_populate_count=settings.get(
            "initial_populate_count", DEFAULT_INITIAL_POPULATE_COUNT
        ),
        four_probability=settings.get("four_probability", DEFAULT_FOUR_PROBABILITY),
        seed=settings.get("seed"),
    )


def save_config(config: EngineConfig, config_path: str) -> None:
    """Save engine configuration to YAML file.

    Args:
        config: Configuration to save
        config_path: Path to output YAML file
    """
    path = Path(config_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, 'w') as f:
        yaml.dump({"engine": asdict(config)}, f, default_flow_style=False, sort_keys=False)
