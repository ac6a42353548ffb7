"""One-sentence natural-language summary of an analysis."""

from collections.abc import Sequence

from app.services.tech_stack.types import ProjectStructure, TechnologyDetection


def compose_summary(tech_stack: Sequence[TechnologyDetection], structure: ProjectStructure) -> str:
    """Describe project type, framework, language, technology count and test presence."""
    framework = structure.framework or next(
        (tech.name for tech in tech_stack if tech.category == "framework"),
        "Unknown",
    )
    tests = "includes" if structure.has_tests else "does not include"

    return (
        f"This is a {structure.type} project built with {framework} using {structure.language}. "
        f"It has {len(tech_stack)} main technologies and {tests} tests."
    )
