"""
Static description of a game: its dynamics, information structure and utility model.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict


class Dynamics(Enum):
    """How players take turns."""
    SEQUENTIAL = "sequential"
    SIMULTANEOUS = "simultaneous"


class ChanceMode(Enum):
    """Whether chance nodes exist."""
    DETERMINISTIC = "deterministic"
    EXPLICIT_STOCHASTIC = "explicit_stochastic"


class Information(Enum):
    """What players can observe."""
    PERFECT_INFORMATION = "perfect_information"
    IMPERFECT_INFORMATION = "imperfect_information"


class Utility(Enum):
    """Relationship between player utilities."""
    ZERO_SUM = "zero_sum"
    CONSTANT_SUM = "constant_sum"
    GENERAL_SUM = "general_sum"


class RewardModel(Enum):
    """When rewards are handed out."""
    TERMINAL = "terminal"
    REWARDS = "rewards"


@dataclass(frozen=True)
class GameType:
    """
    Facts about a game that do not depend on its parameters.

    Attributes:
        short_name: Registry key, e.g. "blokus"
        long_name: Human readable name
        parameter_specification: Default value for every accepted parameter
    """
    short_name: str
    long_name: str
    dynamics: Dynamics = Dynamics.SEQUENTIAL
    chance_mode: ChanceMode = ChanceMode.DETERMINISTIC
    information: Information = Information.PERFECT_INFORMATION
    utility: Utility = Utility.ZERO_SUM
    reward_model: RewardModel = RewardModel.TERMINAL
    min_num_players: int = 2
    max_num_players: int = 2
    provides_information_state_string: bool = True
    provides_information_state_tensor: bool = False
    provides_observation_string: bool = True
    provides_observation_tensor: bool = True
    parameter_specification: Dict[str, Any] = field(default_factory=dict)
