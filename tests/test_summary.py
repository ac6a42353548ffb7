"""Tests for the summary sentence."""

from app.services.tech_stack import ProjectStructure, TechnologyDetection, compose_summary


class TestComposeSummary:
    """Summary template."""

    def test_full_sentence(self) -> None:
        """All fields render into the template."""
        structure = ProjectStructure(
            type="web", framework="Next.js", language="TypeScript", has_tests=True
        )
        techs = [
            TechnologyDetection(name="Next.js", category="framework", confidence=0.95),
            TechnologyDetection(name="TypeScript", category="language", confidence=0.9),
        ]

        summary = compose_summary(techs, structure)

        assert summary == (
            "This is a web project built with Next.js using TypeScript. "
            "It has 2 main technologies and includes tests."
        )

    def test_framework_falls_back_to_detection(self) -> None:
        """Without a structure framework the first framework detection is used."""
        techs = [
            TechnologyDetection(name="Go", category="language", confidence=0.95),
            TechnologyDetection(name="Gin", category="framework", confidence=0.7),
        ]

        summary = compose_summary(techs, ProjectStructure(language="Go"))

        assert "built with Gin" in summary

    def test_unknown_framework(self) -> None:
        """No framework at all renders as Unknown."""
        summary = compose_summary([], ProjectStructure())

        assert summary == (
            "This is a unknown project built with Unknown using unknown. "
            "It has 0 main technologies and does not include tests."
        )

    def test_deterministic(self) -> None:
        """Identical input gives identical output."""
        structure = ProjectStructure(type="library", language="JavaScript")

        assert compose_summary([], structure) == compose_summary([], structure)
