"""
Kata configuration.

Holds the fixed input of each program. Defaults are the classic exercise
literals; a YAML file can override any of them.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Union
import logging

import yaml

logger = logging.getLogger(__name__)


@dataclass
class ReverseConfig:
    """Input for the word reverser."""

    sentence: str = "java developer full stack"


@dataclass
class AnagramConfig:
    """Inputs for the anagram checker."""

    first: str = "listen"
    second: str = "silent"


@dataclass
class DigitConfig:
    """Input for the largest-digit finder."""

    number: int = 10


@dataclass
class PropagateConfig:
    """Input for the multiple-of-ten propagator."""

    numbers: List[int] = field(
        default_factory=lambda: [28, 7, 30, 84, 29, 74, 50, 37, 85, 74, 60, 63, 65, 90, 82]
    )


@dataclass
class KataConfig:
    """Complete kata configuration."""

    reverse: ReverseConfig = field(default_factory=ReverseConfig)
    anagram: AnagramConfig = field(default_factory=AnagramConfig)
    digit: DigitConfig = field(default_factory=DigitConfig)
    propagate: PropagateConfig = field(default_factory=PropagateConfig)


SECTIONS = {
    "reverse": ReverseConfig,
    "anagram": AnagramConfig,
    "digit": DigitConfig,
    "propagate": PropagateConfig,
}


def load_kata_config(config_path: Union[str, Path]) -> KataConfig:
    """
    Load kata configuration from a YAML file.

    Missing sections and keys keep their defaults.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        KataConfig instance
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Config root must be a mapping: {config_path}")

    unknown = set(data) - set(SECTIONS)
    if unknown:
        raise ValueError(f"Unknown config sections: {sorted(unknown)}")

    sections = {}
    for name, section_cls in SECTIONS.items():
        section_data = data.get(name) or {}
        if not isinstance(section_data, dict):
            raise ValueError(f"Config section '{name}' must be a mapping")
        try:
            sections[name] = section_cls(**section_data)
        except TypeError as e:
            raise ValueError(f"Invalid keys in config section '{name}': {e}") from e

    logger.debug(f"Loaded kata config from {path}")
    return KataConfig(**sections)
