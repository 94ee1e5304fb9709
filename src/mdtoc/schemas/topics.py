"""Topic tree models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class TopicNode(BaseModel):
    """A node of the navigation tree.

    Nodes without a ``ref`` are pure containers (group nodes).
    """

    label: str
    ref: str | None = None
    children: list["TopicNode"] = Field(default_factory=list)
