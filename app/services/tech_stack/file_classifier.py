"""
File classification for detected repository files.

Assigns each recognized file a category and an importance weight from
fixed path-pattern lookups.
"""

from collections.abc import Mapping

from app.services.tech_stack.constants import (
    DEFAULT_IMPORTANCE,
    FILE_IMPORTANCE_RULES,
    FILE_TYPE_RULES,
    MANIFEST_FILE_NAMES,
    MANIFEST_IMPORTANCE,
)
from app.services.tech_stack.types import DetectedFile, FileType


def _basename(path: str) -> str:
    return path.rstrip("/").rsplit("/", 1)[-1]


def classify_file(path: str) -> FileType:
    """
    Classify a file path into a file type.

    Manifests are recognized by exact file name; the remaining types by
    case-insensitive substring rules checked in a fixed order.
    """
    if _basename(path) in MANIFEST_FILE_NAMES:
        return "package"

    path_lower = path.lower()
    for file_type, markers in FILE_TYPE_RULES:
        if any(marker in path_lower for marker in markers):
            return file_type  # type: ignore[return-value]

    return "source"


def file_importance(path: str) -> float:
    """Return the importance weight (0-1) of a file path."""
    if _basename(path) in MANIFEST_FILE_NAMES:
        return MANIFEST_IMPORTANCE

    path_lower = path.lower()
    for marker, importance in FILE_IMPORTANCE_RULES:
        if marker in path_lower:
            return importance

    return DEFAULT_IMPORTANCE


def detect_files(config_files: Mapping[str, str | None]) -> list[DetectedFile]:
    """
    Build DetectedFile records for every supplied file that is present.

    Args:
        config_files: Mapping of file path to content, None meaning absent

    Returns:
        DetectedFile list in input order
    """
    return [
        DetectedFile(path=path, type=classify_file(path), importance=file_importance(path))
        for path, content in config_files.items()
        if content is not None
    ]
