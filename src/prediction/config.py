"""
Config loader for SwipeType.
Loads YAML configuration with dataclass validation.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import yaml


@dataclass
class DecoderConfig:
    sigma: float = 22.0                  # Gesture sloppiness tolerance
    min_path_distance: float = 8.0       # Noise filter threshold (path units)
    min_path_points: int = 10            # Filtered points needed to decode
    confidence_threshold: float = -500.0 # Minimum combined score to accept
    min_raw_points: int = 5              # Raw paths this short are taps, not swipes
    points_per_letter: int = 4           # Word length estimate divisor

    def __post_init__(self):
        if self.sigma <= 0:
            raise ValueError(f"sigma must be positive, got {self.sigma}")
        if self.min_path_distance < 0:
            raise ValueError(f"min_path_distance must be >= 0, got {self.min_path_distance}")
        if self.min_path_points < 1:
            raise ValueError(f"min_path_points must be >= 1, got {self.min_path_points}")
        if self.min_raw_points < 0:
            raise ValueError(f"min_raw_points must be >= 0, got {self.min_raw_points}")
        if self.points_per_letter < 1:
            raise ValueError(f"points_per_letter must be >= 1, got {self.points_per_letter}")


@dataclass
class DictionaryConfig:
    word_list: Optional[str] = None       # Newline-delimited list; built-in list if unset
    frequency_file: Optional[str] = None  # JSON word -> frequency, merged on top


@dataclass
class KeyboardConfig:
    layout: str = "qwerty"
    width: float = 400.0    # Keyboard size in path units
    height: float = 200.0


@dataclass
class Config:
    decoder: DecoderConfig = field(default_factory=DecoderConfig)
    dictionary: DictionaryConfig = field(default_factory=DictionaryConfig)
    keyboard: KeyboardConfig = field(default_factory=KeyboardConfig)


def _dict_to_dataclass(cls, data: dict):
    """Convert a dict to a dataclass, ignoring unknown keys."""
    if data is None:
        return cls()
    field_names = {f.name for f in cls.__dataclass_fields__.values()}
    filtered = {k: v for k, v in data.items() if k in field_names}
    return cls(**filtered)


def load_config(config_path: Optional[Path] = None) -> Config:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to config file. If None, uses default config.yaml
                    in project root.

    Returns:
        Config dataclass with all settings.
    """
    if config_path is None:
        # Default to config.yaml in project root
        config_path = Path(__file__).parent.parent.parent / "config.yaml"

    config_path = Path(config_path)

    if not config_path.exists():
        # Return defaults if no config file
        return Config()

    with open(config_path, 'r') as f:
        data = yaml.safe_load(f) or {}

    return Config(
        decoder=_dict_to_dataclass(DecoderConfig, data.get('decoder')),
        dictionary=_dict_to_dataclass(DictionaryConfig, data.get('dictionary')),
        keyboard=_dict_to_dataclass(KeyboardConfig, data.get('keyboard')),
    )
