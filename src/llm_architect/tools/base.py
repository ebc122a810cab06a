"""Common interface shared by all tools."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel


@dataclass(frozen=True)
class ToolMetadata:
    """Describes a tool to callers.

    Attributes:
        name: Unique, stable identifier used for dispatch
        description: Human-readable contract of the tool
        input_model: Pydantic model that validates the tool's arguments
    """

    name: str
    description: str
    input_model: type[BaseModel]


class Tool(ABC):
    """A named unit of functionality that can describe itself and process input."""

    @abstractmethod
    def get_metadata(self) -> ToolMetadata:
        """Return the tool's static descriptor."""

    @abstractmethod
    async def process_input(self, raw: Any) -> str:
        """Validate `raw` arguments, run the tool and return its textual result."""
