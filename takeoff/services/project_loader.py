"""Project file loader.

Reads a JSON project document, parses it into `ProjectInput`, and
normalizes it. File system, JSON syntax and schema problems surface as
`ProjectLoadError`; bounds violations surface as `InvalidArgumentError`
from the validator.
"""

from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from takeoff.core.normalizer import normalize_project
from takeoff.models import ProjectInput, TakeoffProject

logger = logging.getLogger(__name__)


class ProjectLoadError(Exception):
    """
    Raised when a project file cannot be read or parsed.

    Attributes:
        message: Human-readable error message
        error_type: file_not_found | json_parse | validation
        path: Project file path, when loading from disk
        details: Line/column for JSON errors, field errors for schema problems
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def parse_project(data: dict[str, Any], path: Path | None = None) -> ProjectInput:
    try:
        return ProjectInput.model_validate(data)
    except ValidationError as exc:
        details = [
            {"field": ".".join(str(p) for p in err["loc"]), "message": err["msg"]}
            for err in exc.errors()
        ]
        raise ProjectLoadError(
            f"Invalid project document: {details[0]['field']}: {details[0]['message']}",
            error_type="validation",
            path=path,
            details=details,
        ) from exc


def load_project(path: Path | str) -> TakeoffProject:
    """Load, parse and normalize a project file."""
    path = Path(path)
    if not path.exists():
        raise ProjectLoadError(
            f"Project file not found: {path}", error_type="file_not_found", path=path,
        )

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ProjectLoadError(
            f"Invalid JSON in {path}: {exc.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": exc.lineno, "column": exc.colno, "message": exc.msg}],
        ) from exc

    if not isinstance(data, dict):
        raise ProjectLoadError(
            f"Project file {path} must contain a JSON object.",
            error_type="validation",
            path=path,
        )

    logger.info("Loaded project file %s", path)
    return normalize_project(parse_project(data, path))
