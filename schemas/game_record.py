"""
Pydantic schema for a serialized game: which game, its parameters and the
actions played so far.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class GameRecord(BaseModel):
    """A game and the action history that reproduces one of its states."""
    game: str = Field(..., min_length=1, description="Registered short name of the game")
    parameters: Dict[str, Any] = Field(default_factory=dict)
    actions: List[int] = Field(default_factory=list, description="Action ids in the order they were applied")
    returns: Optional[List[float]] = Field(default=None, description="Final returns, present once the game is over")

    class Config:
        json_schema_extra = {
            "example": {
                "game": "blokus",
                "parameters": {"rows": 20, "cols": 20},
                "actions": [0, 7331, 14660],
                "returns": None,
            }
        }
