"""Typed binding tree produced from the rc file."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple, Union

from ..config.constants import DEFAULT_TITLE
from .keychord import KeyChord


@dataclass(frozen=True)
class SingleBinding:
    """A leaf: pressing ``key`` runs the host action ``action_id``."""

    key: str
    key_chord: KeyChord
    description: str
    action_id: str

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "key": self.key,
            "keyChord": self.key_chord.to_key_spec(),
            "description": self.description,
            "actionId": self.action_id,
        }


@dataclass(frozen=True)
class GroupBinding:
    """A sub-menu: pressing ``key`` enters ``children``."""

    key: str
    key_chord: KeyChord
    description: str
    children: Tuple[LeaderBinding, ...]

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "key": self.key,
            "keyChord": self.key_chord.to_key_spec(),
            "description": self.description,
            "bindings": [child.to_dict() for child in self.children],
        }


LeaderBinding = Union[SingleBinding, GroupBinding]


@dataclass(frozen=True)
class Appearance:
    title: str = DEFAULT_TITLE


@dataclass(frozen=True)
class Config:
    """A fully compiled rc file. Replaced as a whole, never mutated."""

    appearance: Appearance = field(default_factory=Appearance)
    bindings: Tuple[LeaderBinding, ...] = ()

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "appearance": {"title": self.appearance.title},
            "bindings": [binding.to_dict() for binding in self.bindings],
        }
