"""
Source content scanning.

Two independent techniques:
- Extension-weighted language inference over source file records
- Case-insensitive substring matching over file contents

This is the only part of the pipeline whose cost grows with total source
size. Callers bound the file set before invoking it.
"""

import re
from collections.abc import Iterable, Mapping, Sequence

from app.services.tech_stack.constants import (
    CONFIG_CONTENT_SIGNATURES,
    CONTENT_SIGNATURES,
    EXTENSION_LANGUAGES,
    LANGUAGE_BASE_CONFIDENCE,
    LANGUAGE_CONFIDENCE_PER_FILE,
    LANGUAGE_MAX_CONFIDENCE,
    MIN_LANGUAGE_FILES,
)
from app.services.tech_stack.types import (
    ConfigAnalysis,
    SourceFile,
    StructureHints,
    TechnologyDetection,
)


def language_for_path(path: str) -> str | None:
    """Map a file path to a language by its extension."""
    name = path.rsplit("/", 1)[-1]
    if "." not in name:
        return None
    extension = name.rsplit(".", 1)[-1].lower()
    return EXTENSION_LANGUAGES.get(extension)


def language_byte_totals(files: Iterable[SourceFile]) -> dict[str, int]:
    """Total byte size per language, keyed in first-encountered order."""
    totals: dict[str, int] = {}
    for file in files:
        language = language_for_path(file.path)
        if language:
            totals[language] = totals.get(language, 0) + max(file.size, 0)
    return totals


def infer_primary_language(files: Sequence[SourceFile]) -> str | None:
    """
    Infer the primary language by accumulated byte size.

    Ties go to the language encountered first in iteration order.
    """
    primary: str | None = None
    best = -1
    for language, total in language_byte_totals(files).items():
        if total > best:
            primary, best = language, total
    return primary


def language_confidence(file_count: int) -> float:
    """Confidence for an extension-inferred language, rising with evidence."""
    return min(
        LANGUAGE_MAX_CONFIDENCE,
        LANGUAGE_BASE_CONFIDENCE + LANGUAGE_CONFIDENCE_PER_FILE * file_count,
    )


def detect_languages(files: Sequence[SourceFile]) -> list[TechnologyDetection]:
    """
    Promote languages with enough contributing files to detections.

    A language needs at least MIN_LANGUAGE_FILES files to be reported.
    """
    counts: dict[str, int] = {}
    for file in files:
        language = language_for_path(file.path)
        if language:
            counts[language] = counts.get(language, 0) + 1

    return [
        TechnologyDetection(
            name=language,
            category="language",
            confidence=language_confidence(count),
            description=f"Detected from {count} source files",
        )
        for language, count in counts.items()
        if count >= MIN_LANGUAGE_FILES
    ]


def scan_source_content(
    files: Sequence[SourceFile],
    known: Iterable[str] = (),
) -> list[TechnologyDetection]:
    """
    Flag technologies from signature substrings in source file contents.

    Args:
        files: Source file records to scan
        known: Technology names already detected by a higher-confidence path

    Returns:
        Detections at the signature's fixed (lower) confidence
    """
    skip = set(known)
    lowered = [file.content.lower() for file in files if file.content]

    detections: list[TechnologyDetection] = []
    for signature in CONTENT_SIGNATURES:
        tech = signature.tech
        if tech.name in skip:
            continue
        if any(needle in content for content in lowered for needle in signature.needles):
            detections.append(
                TechnologyDetection(
                    name=tech.name,
                    category=tech.category,
                    confidence=tech.confidence,
                    description=tech.description or None,
                )
            )
            skip.add(tech.name)

    return detections


def declares_python_package(file_name: str, content_lower: str, package: str) -> bool:
    """
    Check whether a Python manifest declares a dependency by name.

    requirements.txt is parsed line by line; pyproject.toml, Pipfile and
    setup.py are matched against quoted or assignment-style declarations,
    so a framework named in a description or comment does not count.
    """
    if file_name == "requirements.txt":
        for line in content_lower.split("\n"):
            line = line.strip()
            if not line or line.startswith(("#", "-")):
                continue
            # Package name before ==, >=, [extras], etc.
            match = re.match(r"([a-z0-9_.-]+)", line)
            if match and match.group(1) == package:
                return True
        return False

    name = re.escape(package)
    patterns = [
        rf"^\s*{name}\s*=",  # poetry / Pipfile: fastapi = "..."
        rf'["\']{name}["\']',  # PEP 621 list: "fastapi"
        rf'["\']{name}\s*[>=<~!\[;]',  # PEP 621 list: "fastapi>=0.110"
    ]
    return any(re.search(p, content_lower, re.MULTILINE) for p in patterns)


def scan_config_content(
    config_files: Mapping[str, str | None],
    known: Iterable[str] = (),
) -> ConfigAnalysis:
    """
    Detect frameworks declared inside non-JavaScript manifests.

    Matches go.mod, Cargo.toml, Python manifests, JVM build files, Gemfile
    and composer.json contents against CONFIG_CONTENT_SIGNATURES.
    """
    skip = set(known)
    tech_stack: list[TechnologyDetection] = []
    structure = StructureHints()

    for signature in CONFIG_CONTENT_SIGNATURES:
        tech = signature.tech
        if tech.name in skip:
            continue

        for file_name in signature.files:
            content = config_files.get(file_name)
            if not content:
                continue
            content_lower = content.lower()
            if signature.package:
                matched = declares_python_package(file_name, content_lower, signature.package)
            else:
                matched = any(needle in content_lower for needle in signature.needles)
            if not matched:
                continue

            tech_stack.append(
                TechnologyDetection(
                    name=tech.name,
                    category=tech.category,
                    confidence=tech.confidence,
                    description=tech.description or None,
                )
            )
            if signature.sets_framework:
                structure.framework = tech.name
                structure.type = "web"
            skip.add(tech.name)
            break

    return ConfigAnalysis(tech_stack=tech_stack, structure=structure)
