"""Core pipeline components shared by scheduling workflows."""

from scheduling.core.base_agent import BaseAgent
from scheduling.core.runner import PipelineRunner

__all__ = ["BaseAgent", "PipelineRunner"]
