"""
Auxiliary configuration file analysis.

Presence-only checks over recognized build files, lockfiles, container
files and CI markers. File contents are never parsed here; content-aware
checks live in source_scanner.
"""

from collections.abc import Mapping

from app.services.tech_stack.constants import (
    BUILD_TOOL_FILES,
    CI_MARKERS,
    CONFIG_FILE_SIGNATURES,
    LOCKFILE_PACKAGE_MANAGERS,
)
from app.services.tech_stack.types import ConfigAnalysis, StructureHints, TechnologyDetection


def is_present(files: Mapping[str, str | None], name: str) -> bool:
    """A file is present when its key exists with non-None content (empty counts)."""
    return files.get(name) is not None


def analyze_config_files(files: Mapping[str, str | None]) -> ConfigAnalysis:
    """
    Analyze the presence of auxiliary configuration files.

    Args:
        files: Mapping of recognized file name to content, None meaning absent

    Returns:
        ConfigAnalysis with detections and structural hints
    """
    tech_stack: list[TechnologyDetection] = []
    structure = StructureHints()

    for signature in CONFIG_FILE_SIGNATURES:
        if not any(is_present(files, name) for name in signature.files):
            continue

        if signature.language:
            structure.language = signature.language
        if signature.has_typescript:
            structure.has_typescript = True

        for tech in signature.detections:
            tech_stack.append(
                TechnologyDetection(
                    name=tech.name,
                    category=tech.category,
                    confidence=tech.confidence,
                    description=tech.description or None,
                )
            )

    structure.build_tool = _first_match(files, BUILD_TOOL_FILES)
    structure.package_manager = _first_match(files, LOCKFILE_PACKAGE_MANAGERS)
    structure.has_ci = any(is_present(files, marker) for marker in CI_MARKERS)

    return ConfigAnalysis(tech_stack=tech_stack, structure=structure)


def _first_match(files: Mapping[str, str | None], table: tuple[tuple[str, str], ...]) -> str | None:
    for name, value in table:
        if is_present(files, name):
            return value
    return None
