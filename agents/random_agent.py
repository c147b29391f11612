"""
Random agent for Blokus that picks uniformly from legal actions.
"""

from typing import Any, Dict, List, Optional

import numpy as np

from spiel.state import State


class RandomAgent:
    """
    Random agent that selects actions uniformly from the legal actions.

    Serves as a baseline and as the driver for self-play simulations.
    """

    def __init__(self, seed: Optional[int] = None):
        """
        Initialize random agent.

        Args:
            seed: Random seed for reproducible behavior
        """
        self.rng = np.random.RandomState(seed)

    def select_action(self, state: State, legal_actions: Optional[List[int]] = None) -> Optional[int]:
        """
        Select a random legal action for the player to move.

        Args:
            state: State to act in
            legal_actions: Precomputed state.legal_actions(), if the caller has it

        Returns:
            Selected action id, or None if the state is terminal
        """
        if legal_actions is None:
            legal_actions = state.legal_actions()
        if not legal_actions:
            return None
        return legal_actions[self.rng.randint(0, len(legal_actions))]

    def get_action_info(self) -> Dict[str, Any]:
        """Get information about the agent."""
        return {
            "name": "RandomAgent",
            "type": "random",
            "description": "Selects actions uniformly from legal actions"
        }

    def set_seed(self, seed: int):
        self.rng = np.random.RandomState(seed)
