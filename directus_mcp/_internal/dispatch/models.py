"""Pydantic models for dispatcher inputs and outputs.

These models mirror the MCP tool-call result: one text block per response.
"""

import json
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

# =============================================================================
# Constants
# =============================================================================

ERROR_PREFIX = "Error: "
JSON_INDENT = 2

# =============================================================================
# Per-call Context
# =============================================================================


class CallContext(BaseModel):
    """Connection settings for one invocation.

    Each field is the argument-supplied value, else the effective config value.
    """

    model_config = ConfigDict(frozen=True)

    url: str
    token: str


# =============================================================================
# Response Envelope
# =============================================================================


class TextBlock(BaseModel):
    """A single text content block."""

    type: Literal["text"] = "text"
    text: str


class ResponseEnvelope(BaseModel):
    """Uniform success/error container returned for every invocation."""

    content: list[TextBlock]
    is_error: bool = False

    @property
    def text(self) -> str:
        return "".join(block.text for block in self.content)

    @classmethod
    def from_text(cls, text: str) -> "ResponseEnvelope":
        return cls(content=[TextBlock(text=text)])

    @classmethod
    def from_data(cls, data: Any) -> "ResponseEnvelope":
        """Serialize `data` as indented JSON."""
        return cls.from_text(render_json(data))

    @classmethod
    def from_error(cls, message: str) -> "ResponseEnvelope":
        return cls(content=[TextBlock(text=f"{ERROR_PREFIX}{message}")], is_error=True)


def render_json(data: Any) -> str:
    return json.dumps(data, indent=JSON_INDENT, ensure_ascii=False, default=str)
