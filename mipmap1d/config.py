"""
Configuration schemas for mipmap1d YAML-driven runs.

Provides validated configuration classes using dataclasses.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Dict, Any
from pathlib import Path
import logging

import yaml


@dataclass
class DatasetConfig:
    """Input series configuration."""
    path: str
    value_col: Optional[str] = None
    time_col: Optional[str] = None

    def __post_init__(self):
        """Validate dataset configuration."""
        if not self.path:
            raise ValueError("Dataset path is required")


@dataclass
class PyramidConfig:
    """Pyramid query configuration."""
    max_points: Optional[int] = None

    def __post_init__(self):
        """Validate pyramid configuration."""
        if self.max_points is not None and self.max_points < 1:
            raise ValueError(f"max_points must be >= 1, got {self.max_points}")


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "WARNING"

    def __post_init__(self):
        """Validate logging configuration."""
        valid_level = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if not isinstance(self.level, str):
            raise ValueError(f"level must be one of {valid_level}, got {self.level!r}")
        self.level = self.level.upper()
        if self.level not in valid_level:
            raise ValueError(f"level must be one of {valid_level}, got {self.level}")

    def apply(self) -> None:
        """Configure root logging at this level."""
        logging.basicConfig(level=getattr(logging, self.level), force=True)


@dataclass
class MipMapConfig:
    """Complete run configuration."""
    dataset: DatasetConfig
    pyramid: PyramidConfig = field(default_factory=PyramidConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> MipMapConfig:
        """Create MipMapConfig from dictionary (e.g., from YAML)."""
        if 'dataset' not in data:
            raise ValueError("Missing required section: dataset")
        return cls(
            dataset=DatasetConfig(**data['dataset']),
            pyramid=PyramidConfig(**(data.get('pyramid') or {})),
            logging=LoggingConfig(**(data.get('logging') or {}))
        )

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> MipMapConfig:
        """Load configuration from YAML file."""
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        with open(yaml_path, 'r') as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {yaml_path}")

        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        from dataclasses import asdict
        return asdict(self)
