"""Project ingestion. Validates a raw project document and converts it to
the native, unit-typed `TakeoffProject`."""

from __future__ import annotations
import logging

from takeoff.models import Length, Opening, PenetrationInput, ProjectInput, TakeoffProject
from takeoff.models.errors import InvalidArgumentError
from takeoff.core.validator import validate_layout

logger = logging.getLogger(__name__)


def normalize_project(raw: ProjectInput) -> TakeoffProject:
    if not raw.name or not raw.name.strip():
        raise InvalidArgumentError("name", "Project name is required.")

    settings = raw.settings.validate_settings()
    validate_layout(raw.wall_height_feet, raw.wall_lengths_feet, raw.penetrations)

    project = TakeoffProject(
        name=raw.name.strip(),
        wall_height=Length.from_feet(raw.wall_height_feet),
        wall_lengths=tuple(Length.from_feet(v) for v in raw.wall_lengths_feet),
        settings=settings,
        openings=tuple(_to_opening(p) for p in raw.penetrations),
    )
    logger.debug(
        "Normalized project %r: %d wall(s), %d opening(s)",
        project.name, len(project.wall_lengths), len(project.openings),
    )
    return project


def _to_opening(p: PenetrationInput) -> Opening:
    return Opening(
        id=p.id or "",
        type=(p.type or "").strip(),
        wall_index=p.wall_index,
        x=Length.from_feet(p.x_feet),
        y=Length.from_feet(p.y_feet),
        width=Length.from_feet(p.width_feet),
        height=Length.from_feet(p.height_feet),
    )
