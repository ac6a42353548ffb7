"""
Manifest (package.json) analysis.

Extracts dependency records and catalog-matched technologies from a
package manifest, plus the structural hints the manifest implies.
"""

import json
import logging
from collections.abc import Mapping
from typing import Any

from app.services.tech_stack.constants import (
    DEPENDENCY_CLASSES,
    JAVASCRIPT_LANGUAGE,
    MANIFEST_SIGNATURES,
    PACKAGE_DESCRIPTIONS,
    DependencySignature,
)
from app.services.tech_stack.types import (
    DependencyRecord,
    ManifestAnalysis,
    StructureHints,
    TechnologyDetection,
)

logger = logging.getLogger(__name__)


def get_package_description(name: str) -> str:
    """Return a short description for well-known packages, empty if unknown."""
    return PACKAGE_DESCRIPTIONS.get(name, "")


def analyze_package_json(content: str) -> ManifestAnalysis:
    """
    Analyze package.json content.

    Malformed input never raises: the analyzer logs a warning and returns
    an empty ManifestAnalysis so the rest of the pipeline keeps running.

    Args:
        content: Raw package.json text

    Returns:
        ManifestAnalysis with tech stack, dependency records and structure hints
    """
    try:
        data = json.loads(content)
    # JSONDecodeError is a ValueError; oversized int literals raise a plain
    # ValueError and deep nesting a RecursionError
    except (ValueError, RecursionError, TypeError) as e:
        logger.warning(f"Failed to parse package.json: {e}")
        return ManifestAnalysis()

    if not isinstance(data, dict):
        logger.warning("package.json root is not an object, ignoring")
        return ManifestAnalysis()

    classes = _read_dependency_classes(data)
    if classes is None:
        return ManifestAnalysis()

    dependencies = _build_dependency_records(classes)

    # Runtime + dev names are matched against the catalog; dev wins on conflicts
    declared: dict[str, str] = {}
    declared.update(classes["dependencies"])
    declared.update(classes["devDependencies"])

    tech_stack: list[TechnologyDetection] = []
    structure = StructureHints()
    has_typescript = False

    for signature in MANIFEST_SIGNATURES:
        trigger = _first_present_trigger(signature, declared)
        if trigger is None:
            continue

        tech = signature.tech
        tech_stack.append(
            TechnologyDetection(
                name=tech.name,
                category=tech.category,
                confidence=tech.confidence,
                version=declared[trigger] or None,
                description=tech.description or None,
            )
        )

        if signature.sets_framework:
            structure.framework = tech.name
            structure.type = "web"
        if signature.marks_tests:
            structure.has_tests = True
        if signature.marks_linting:
            structure.has_linting = True
        if signature.marks_typescript:
            has_typescript = True

    # No TypeScript signal means JavaScript, not "unknown"
    if has_typescript:
        structure.language = "TypeScript"
        structure.has_typescript = True
    else:
        structure.language = JAVASCRIPT_LANGUAGE

    package_manager = data.get("packageManager")
    if isinstance(package_manager, str) and package_manager:
        structure.package_manager = package_manager

    return ManifestAnalysis(
        tech_stack=tech_stack,
        dependencies=dependencies,
        structure=structure,
    )


def _read_dependency_classes(data: Mapping[str, Any]) -> dict[str, dict[str, str]] | None:
    """
    Validate the dependency class maps of a manifest.

    Missing classes default to empty. A class that is present but not a
    mapping marks the whole manifest as malformed (returns None).
    """
    classes: dict[str, dict[str, str]] = {}
    for key, _is_dev, _is_optional in DEPENDENCY_CLASSES:
        raw = data.get(key)
        if raw is None:
            classes[key] = {}
            continue
        if not isinstance(raw, dict):
            logger.warning(f"package.json '{key}' is not an object, ignoring manifest")
            return None
        classes[key] = {str(name): _as_version(version) for name, version in raw.items()}
    return classes


def _as_version(value: Any) -> str:
    if isinstance(value, str):
        return value
    if value is None:
        return ""
    return str(value)


def _build_dependency_records(classes: dict[str, dict[str, str]]) -> list[DependencyRecord]:
    records: list[DependencyRecord] = []
    for key, is_dev, is_optional in DEPENDENCY_CLASSES:
        for name, version in classes[key].items():
            records.append(
                DependencyRecord(
                    name=name,
                    version=version,
                    is_dev=is_dev,
                    is_optional=is_optional,
                    description=get_package_description(name),
                )
            )
    return records


def _first_present_trigger(signature: DependencySignature, declared: Mapping[str, str]) -> str | None:
    for trigger in signature.triggers:
        if trigger in declared:
            return trigger
    return None
