"""
Configuration for the character n-gram language model.

Settings can be created directly, from a dictionary, or from a JSON file
passed to the command line with ``--config``.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Dict, Optional


@dataclass
class ModelConfig:
    """
    Configuration for training and generation.

    Attributes:
        window_length: Number of characters in each context key
        seed: Random seed for reproducible generation (None = non-deterministic)
        generate_length: Default number of characters to generate
        encoding: Text encoding used when reading the corpus
        clean_corpus: Whether to run corpus cleaning before training
    """

    window_length: int = 3
    seed: Optional[int] = None
    generate_length: int = 200
    encoding: str = "utf-8"
    clean_corpus: bool = False

    @classmethod
    def from_dict(cls, config_dict: Dict) -> "ModelConfig":
        """Create ModelConfig from a dictionary, ignoring unknown keys."""
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in config_dict.items() if k in names})

    @classmethod
    def from_json(cls, path: str | Path) -> "ModelConfig":
        """Load ModelConfig from a JSON file."""
        with open(path, "r", encoding="utf-8") as f:
            return cls.from_dict(json.load(f))

    def to_dict(self) -> Dict:
        """Convert ModelConfig to dictionary."""
        return asdict(self)
