"""
Configuration module for neighbor_finder.

Contains the FinderConfig dataclass with report and input parameters, the
coordinate limits shared by the geometry types, and YAML load/save helpers.
"""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict

import yaml

# Allowed coordinate range (inclusive) for points and rectangles
COORD_MIN: int = -99_000
COORD_MAX: int = 99_000

DEFAULT_PROMPT = "Print two coordinates through whitespace. Type 'end' to view result"


@dataclass
class FinderConfig:
    """Configuration for neighbor reports.

    Parameters
    ----------
    radius_factor : float
        Multiplier applied to the nearest-neighbor distance to get the
        search radius used for counting neighbors.
    precision : int
        Decimal places for the radius in report lines.
    end_token : str
        Line that terminates interactive input.
    prompt : str
        Message shown before reading interactive input.
    show_progress : bool
        Display a progress bar while querying.
    log_level : str
        Logging level name used by the CLI.
    output_dir : Path
        Default directory for JSON reports.
    """

    # Report
    radius_factor: float = 2.0
    precision: int = 2

    # Interactive input
    end_token: str = "end"
    prompt: str = DEFAULT_PROMPT

    # Runtime
    show_progress: bool = True
    log_level: str = "WARNING"

    # Output
    output_dir: Path = field(default_factory=lambda: Path("./output"))

    def __post_init__(self):
        if self.radius_factor <= 0:
            raise ValueError(f"radius_factor must be positive, got {self.radius_factor}")
        if self.precision < 0:
            raise ValueError(f"precision must be non-negative, got {self.precision}")


# YAML section -> config keys stored in that section
_SECTIONS: Dict[str, list] = {
    "report": ["radius_factor", "precision"],
    "input": ["end_token", "prompt"],
    "logging": ["show_progress", "log_level"],
    "output": ["output_dir"],
}


def load_config(yaml_path: Path) -> FinderConfig:
    """
    Load configuration from YAML file.

    Parameters
    ----------
    yaml_path : Path
        Path to YAML configuration file.

    Returns
    -------
    FinderConfig
        Configuration object with values from file.

    Raises
    ------
    FileNotFoundError
        If the YAML file does not exist.
    ValueError
        If the YAML file contains unknown keys or invalid values.
    """
    yaml_path = Path(yaml_path)
    if not yaml_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {yaml_path}")

    with open(yaml_path) as f:
        data = yaml.safe_load(f)

    if data is None:
        return FinderConfig()
    if not isinstance(data, dict):
        raise ValueError(f"Configuration must be a mapping, got {type(data).__name__}")

    config_dict = _flatten_config(data)

    known = {f.name for f in fields(FinderConfig)}
    unknown = sorted(set(config_dict) - known)
    if unknown:
        raise ValueError(f"Unknown configuration keys: {', '.join(unknown)}")

    if "output_dir" in config_dict:
        config_dict["output_dir"] = Path(config_dict["output_dir"])

    return FinderConfig(**config_dict)


def save_config(config: FinderConfig, yaml_path: Path) -> None:
    """
    Save configuration to YAML file.

    Parameters
    ----------
    config : FinderConfig
        Configuration object to save.
    yaml_path : Path
        Path to output YAML file.
    """
    data = _unflatten_config(config)

    yaml_path = Path(yaml_path)
    yaml_path.parent.mkdir(parents=True, exist_ok=True)
    with open(yaml_path, "w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)


def _flatten_config(data: Dict[str, Any]) -> Dict[str, Any]:
    """Flatten nested YAML structure to flat config dict."""
    result = {}
    for key, value in data.items():
        if key in _SECTIONS and isinstance(value, dict):
            for k, v in value.items():
                result[k] = v
        else:
            result[key] = value
    return result


def _unflatten_config(config: FinderConfig) -> Dict[str, Any]:
    """Convert flat config to nested structure for YAML output."""
    data = {}
    for section, keys in _SECTIONS.items():
        data[section] = {key: getattr(config, key) for key in keys}
    data["output"]["output_dir"] = str(config.output_dir)
    return data


def config_summary(config: FinderConfig) -> Dict[str, Any]:
    """Return the configuration as a JSON-serializable flat dict."""
    summary = {f.name: getattr(config, f.name) for f in fields(config)}
    summary["output_dir"] = str(config.output_dir)
    return summary
