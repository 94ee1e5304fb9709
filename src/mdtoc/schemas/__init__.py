"""Shared schemas for mdtoc."""

from mdtoc.schemas.topics import TopicNode

__all__ = ["TopicNode"]
