"""Project models: the raw JSON document and its normalized form."""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .building import Opening, Wall
from .parameters import ProjectSettings
from .units import Length


class PenetrationInput(BaseModel):
    """An opening as written in the project file. Wall-local feet."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str | None = ""
    type: str | None = ""
    wall_index: int = 0
    x_feet: float = 0.0
    y_feet: float = 0.0
    width_feet: float = 0.0
    height_feet: float = 0.0

    def label(self, index: int) -> str:
        return self.id if self.id and self.id.strip() else f"#{index + 1}"


class ProjectInput(BaseModel):
    """Project document as loaded from JSON, before validation."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = ""
    wall_height_feet: float = 0.0
    wall_lengths_feet: list[float] = []
    settings: ProjectSettings = Field(default_factory=ProjectSettings)
    penetrations: list[PenetrationInput] = []


class TakeoffProject(BaseModel):
    """
    Normalized, validated project.

    Openings live in one flat list keyed by `wall_index`; walls never
    own their openings.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    wall_height: Length
    wall_lengths: tuple[Length, ...]
    settings: ProjectSettings
    openings: tuple[Opening, ...] = ()

    @property
    def walls(self) -> list[Wall]:
        return [Wall(index=i, length=length) for i, length in enumerate(self.wall_lengths)]

    def openings_on_wall(self, wall_index: int) -> list[Opening]:
        return [o for o in self.openings if o.wall_index == wall_index]

    def total_wall_length(self) -> Length:
        return Length.from_inches(sum(length.inches for length in self.wall_lengths))
