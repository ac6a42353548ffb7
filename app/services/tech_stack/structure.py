"""
Project structure synthesis and architecture pattern detection.

Folds the partial structure hints of each analyzer into one
ProjectStructure, and derives architecture patterns from the directory
layout plus the merged tech stack.
"""

from collections.abc import Iterable, Sequence

from app.services.tech_stack.constants import (
    BACKEND_DIRS,
    CI_PATH_MARKERS,
    DOC_DIR_MARKERS,
    FRONTEND_DIRS,
    MIN_SERVICE_DIRS,
    MONOREPO_DIRS,
    REST_API_FRAMEWORKS,
    STATIC_HOSTING_SERVICES,
    STATIC_SITE_FRAMEWORKS,
    TEST_PATH_MARKERS,
)
from app.services.tech_stack.types import ProjectStructure, StructureHints, TechnologyDetection

_SCALAR_FIELDS = ("framework", "language", "build_tool", "package_manager")
_FLAG_FIELDS = ("has_tests", "has_documentation", "has_ci", "has_linting", "has_typescript")


def scan_file_paths(paths: Iterable[str]) -> StructureHints:
    """
    Structural scan of the full path list.

    Detects documentation, tests and CI from path patterns alone,
    independent of what the manifest declares.
    """
    has_documentation = False
    has_tests = False
    has_ci = False

    for path in paths:
        path_lower = path.lower()
        name = path_lower.rsplit("/", 1)[-1]

        if "readme" in name or _has_marker(path_lower, DOC_DIR_MARKERS):
            has_documentation = True
        if _has_marker(path_lower, TEST_PATH_MARKERS):
            has_tests = True
        if _has_marker(path_lower, CI_PATH_MARKERS):
            has_ci = True

    return StructureHints(
        has_tests=has_tests,
        has_documentation=has_documentation,
        has_ci=has_ci,
    )


def _has_marker(path_lower: str, markers: tuple[str, ...]) -> bool:
    # Directory markers also match at the repository root ("docs/x" as well as "a/docs/x")
    for marker in markers:
        if marker.endswith("/"):
            if path_lower.startswith(marker) or f"/{marker}" in path_lower:
                return True
        elif marker in path_lower:
            return True
    return False


def synthesize_structure(
    hints: Sequence[StructureHints],
    manifest_present: bool = False,
) -> ProjectStructure:
    """
    Fold structure hints into a resolved ProjectStructure.

    Args:
        hints: Hints in application order (manifest, config, content, path scan)
        manifest_present: Whether a manifest was analyzed

    Returns:
        ProjectStructure where scalars are last-applied-wins and flags are OR-ed
    """
    structure = ProjectStructure()

    for hint in hints:
        if hint.type is not None and hint.type != "unknown":
            structure.type = hint.type
        for name in _SCALAR_FIELDS:
            value = getattr(hint, name)
            if value is not None:
                setattr(structure, name, value)
        for name in _FLAG_FIELDS:
            if getattr(hint, name):
                setattr(structure, name, True)

    if structure.type == "unknown" and manifest_present:
        structure.type = "library"

    return structure


def _directories(paths: Iterable[str]) -> set[str]:
    """Every directory prefix of every path, e.g. "src/models/user.py" gives src and src/models."""
    directories: set[str] = set()
    for path in paths:
        parts = path.strip("/").split("/")[:-1]
        for i in range(1, len(parts) + 1):
            directories.add("/".join(parts[:i]))
    return directories


def detect_patterns(
    paths: Iterable[str],
    tech_stack: Sequence[TechnologyDetection],
) -> list[str]:
    """
    Detect architectural patterns in the repository.

    Args:
        paths: Flat list of file paths
        tech_stack: Merged tech stack

    Returns:
        List of detected pattern names
    """
    directories = _directories(paths)
    names = {tech.name for tech in tech_stack}
    patterns: list[str] = []

    # Top-level workspace folders
    if any(d in directories for d in MONOREPO_DIRS):
        patterns.append("Monorepo")

    has_frontend = any(d in directories for d in FRONTEND_DIRS)
    has_backend = any(d in directories for d in BACKEND_DIRS)
    if has_frontend and has_backend:
        patterns.append("Frontend/Backend Split")

    if names & REST_API_FRAMEWORKS:
        patterns.append("REST API")

    service_dirs = [d for d in directories if "service" in d.rsplit("/", 1)[-1].lower()]
    if len(service_dirs) >= MIN_SERVICE_DIRS:
        patterns.append("Microservices")

    has_models = any("model" in d for d in directories)
    has_views = any("views" in d or "templates" in d for d in directories)
    has_controllers = any("controllers" in d or "routes" in d for d in directories)
    if has_models and (has_views or has_controllers):
        patterns.append("MVC/Layered Architecture")

    if any("domain" in d for d in directories):
        patterns.append("Domain-Driven Design")

    if names & STATIC_SITE_FRAMEWORKS and names & STATIC_HOSTING_SERVICES:
        patterns.append("JAMstack")

    return patterns
