"""
Pydantic schema for Blokus game parameters.

Parameters can be given as keyword arguments, a dictionary, or a YAML/JSON
config file.
"""

import json
from pathlib import Path
from typing import Any, Dict, Union

import yaml
from pydantic import BaseModel, Field


class GameConfig(BaseModel):
    """Parameters of a Blokus game."""
    rows: int = Field(default=20, ge=2, le=50, description="Number of board rows")
    cols: int = Field(default=20, ge=2, le=50, description="Number of board columns")
    use_frontier_movegen: bool = Field(
        default=True,
        description="Prune legal-move generation to placements covering a frontier cell",
    )

    class Config:
        extra = "forbid"
        json_schema_extra = {
            "example": {
                "rows": 20,
                "cols": 20,
                "use_frontier_movegen": True,
            }
        }

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "GameConfig":
        """Create config from dictionary, ignoring None values."""
        filtered_dict = {k: v for k, v in config_dict.items() if v is not None}
        return cls(**filtered_dict)

    @classmethod
    def from_file(cls, config_path: Union[str, Path]) -> "GameConfig":
        """Load config from YAML or JSON file."""
        config_path = Path(config_path)

        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "r") as f:
            if config_path.suffix.lower() in [".yaml", ".yml"]:
                config_dict = yaml.safe_load(f) or {}
            elif config_path.suffix.lower() == ".json":
                config_dict = json.load(f)
            else:
                raise ValueError(f"Unsupported config file format: {config_path.suffix}")

        return cls.from_dict(config_dict)
