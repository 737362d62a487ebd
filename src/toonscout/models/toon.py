"""Toon status document models.

Mirrors the JSON the local companion service serves at ``info.json``.
Fields ToonScout never reads are ignored on validation.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from toonscout.models.constants import HIGHEST_GAG


class ToonIdentity(BaseModel):
    name: str
    id: str = ""


class Laff(BaseModel):
    """Current and maximum laff points. current <= max is assumed, not enforced."""

    current: int
    max: int


class Location(BaseModel):
    district: str = ""
    zone: str = ""
    neighborhood: str = ""


class Gag(BaseModel):
    name: str
    level: int


class Experience(BaseModel):
    current: int = 0
    next: int = 0


class GagProgress(BaseModel):
    """A toon's standing in one gag track."""

    gag: Gag
    experience: Experience = Field(default_factory=Experience)
    organic: bool = False

    @property
    def maxed(self) -> bool:
        return self.gag.level == HIGHEST_GAG


class TaskProgress(BaseModel):
    text: str = ""


class TaskObjective(BaseModel):
    text: str = ""
    progress: TaskProgress = Field(default_factory=TaskProgress)


class TaskDestination(BaseModel):
    """Where a visit task sends the toon. Empty for standard tasks."""

    name: str = ""
    building: str = ""
    zone: str = ""
    neighborhood: str = ""


class Task(BaseModel):
    objective: TaskObjective = Field(default_factory=TaskObjective)
    reward: str = ""
    to: TaskDestination = Field(default_factory=TaskDestination)
    deletable: bool = False

    @property
    def is_visit(self) -> bool:
        """Visit tasks carry no ongoing progress, only an empty or 'Complete' marker."""
        return self.objective.progress.text in ("", "Complete")


class Toon(BaseModel):
    """The full status document for the toon currently logged in."""

    toon: ToonIdentity
    laff: Laff
    location: Location = Field(default_factory=Location)
    # The service reports unowned tracks as null.
    gags: dict[str, GagProgress | None] = Field(default_factory=dict)
    tasks: list[Task] = Field(default_factory=list)

    @property
    def name(self) -> str:
        return self.toon.name

    def gag_track(self, track: str) -> GagProgress | None:
        """Return the toon's progress in *track*, or None if the track is not owned."""
        return self.gags.get(track)
