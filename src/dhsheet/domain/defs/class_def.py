"""Character class definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ClassDef:
    """Defines the domain pair and starting vitals of a class."""

    id: str
    name: str
    domains: tuple[str, str]
    starting_hp: int
    starting_evasion: int
