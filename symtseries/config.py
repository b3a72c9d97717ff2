"""
Configuration schemas for the symtseries YAML-based pipeline.

Provides type-safe, validated configuration classes using dataclasses.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Dict, Any
from pathlib import Path
import yaml

from .core.encoder import check_nwc


@dataclass
class InputConfig:
    """Input series configuration."""
    path: str
    column: int = 0
    delimiter: Optional[str] = None
    skip_header: int = 0

    def __post_init__(self):
        """Validate input configuration."""
        if not self.path:
            raise ValueError("Input path is required")
        if self.column < 0:
            raise ValueError(f"column must be >= 0, got {self.column}")
        if self.skip_header < 0:
            raise ValueError(f"skip_header must be >= 0, got {self.skip_header}")


@dataclass
class SAXConfig:
    """Window length, word length and cardinality."""
    n: int
    w: int
    c: int = 4

    def __post_init__(self):
        """Validate SAX parameters with the same limits as Window."""
        check_nwc(self.n, self.w, self.c)


@dataclass
class StreamConfig:
    """How the series is fed to the encoder."""
    mode: str = "window"
    step: int = 1

    def __post_init__(self):
        """Validate stream configuration."""
        valid_mode = {"window", "batch"}
        if self.mode not in valid_mode:
            raise ValueError(f"mode must be one of {valid_mode}, got {self.mode}")
        if self.step < 1:
            raise ValueError(f"step must be >= 1, got {self.step}")


@dataclass
class OutputConfig:
    """Output configuration."""
    format: str = "jsonl"
    path: Optional[str] = None
    include_values: bool = False

    def __post_init__(self):
        """Validate output configuration."""
        valid_format = {"jsonl", "csv"}
        if self.format not in valid_format:
            raise ValueError(f"format must be one of {valid_format}, got {self.format}")


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    format: str = "%(message)s"
    log_errors: bool = True
    error_path: Optional[str] = None

    def __post_init__(self):
        """Validate logging configuration."""
        self.level = self.level.upper()
        if not isinstance(logging.getLevelName(self.level), int):
            raise ValueError(f"Unknown logging level: {self.level}")

    def apply(self) -> None:
        """Configure the root logger."""
        logging.basicConfig(level=self.level, format=self.format)


@dataclass
class PipelineConfig:
    """Complete pipeline configuration."""
    input: InputConfig
    sax: SAXConfig
    output: OutputConfig = field(default_factory=OutputConfig)
    stream: StreamConfig = field(default_factory=StreamConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> PipelineConfig:
        """Create PipelineConfig from dictionary (e.g., from YAML)."""
        return cls(
            input=InputConfig(**data['input']),
            sax=SAXConfig(**data['sax']),
            output=OutputConfig(**data.get('output', {})),
            stream=StreamConfig(**data.get('stream', {})),
            logging=LoggingConfig(**data.get('logging', {}))
        )

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> PipelineConfig:
        """Load configuration from YAML file."""
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        with open(yaml_path, 'r') as f:
            data = yaml.safe_load(f) or {}

        # Validate required sections
        required = ['input', 'sax']
        for section in required:
            if section not in data:
                raise ValueError(f"Missing required section: {section}")

        config = cls.from_dict(data)
        # Relative input paths are resolved against the config file
        input_path = Path(config.input.path)
        if not input_path.is_absolute():
            config.input.path = str(yaml_path.parent / input_path)
        return config

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        from dataclasses import asdict
        return asdict(self)
