"""Abstract base class for all scheduling agents."""

from abc import ABC, abstractmethod
from typing import Any, Dict


class BaseAgent(ABC):
    """
    Abstract base class that all agents must inherit from.

    An agent is one step of a scheduling workflow. It reads the keys it needs
    from the shared context and returns only the keys it produces.
    """

    def __init__(self, name: str) -> None:
        """
        Initialize the agent.

        Args:
            name: Unique identifier for this agent.
        """
        self.name = name

    @abstractmethod
    def run(self, input_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Execute the agent's step.

        Args:
            input_data: Accumulated pipeline context.

        Returns:
            Dictionary of keys to merge into the context.
        """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
