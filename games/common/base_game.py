"""Base class for games.

Game metadata (NAME, DESCRIPTION, etc.) and CLI arguments (ARGUMENTS)
are declared as class attributes so runners can build their argument
parsers without instantiating a game.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from games.common.game_state import GameState


class BaseGame(ABC):
    """Abstract base class for games.

    Class Attributes (metadata):
        NAME: Display name for the game
        DESCRIPTION: Short description of gameplay
        VERSION: Semantic version string
        AUTHOR: Author/team name
        ARGUMENTS: List of CLI argument definitions for argparse

    Subclasses must implement:
        - state -> GameState: Current state tag
        - get_score() -> int: Return current score
        - tick(): Advance one frame
    """

    NAME: str = "Unnamed Game"
    DESCRIPTION: str = "No description"
    VERSION: str = "1.0.0"
    AUTHOR: str = "Unknown"

    # CLI argument definitions for argparse
    # Each entry is a dict with keys: name, type, default, help, choices (optional)
    ARGUMENTS: List[Dict[str, Any]] = []

    @classmethod
    def get_arguments(cls) -> List[Dict[str, Any]]:
        """Get CLI arguments for this game, duplicates by name removed."""
        seen_names = set()
        result = []
        for arg in cls.ARGUMENTS:
            name = arg.get('name', '')
            if name and name not in seen_names:
                seen_names.add(name)
                result.append(arg)
        return result

    @classmethod
    def get_info(cls) -> Dict[str, Any]:
        """Get game metadata as a dictionary.

        Returns:
            Dict with keys: name, description, version, author, arguments
        """
        return {
            'name': cls.NAME,
            'description': cls.DESCRIPTION,
            'version': cls.VERSION,
            'author': cls.AUTHOR,
            'arguments': cls.get_arguments(),
        }

    @property
    @abstractmethod
    def state(self) -> GameState:
        """Current game state."""

    @abstractmethod
    def get_score(self) -> int:
        """Get current score."""

    @abstractmethod
    def tick(self) -> None:
        """Advance the game by one frame. Must be safe to call in any state."""
