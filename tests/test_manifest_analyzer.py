"""
Tests for package.json analysis.

Tests cover:
- Catalog matching and structure hints (framework, type, language)
- Dependency records across runtime, dev and optional classes
- Version and trigger handling
- Malformed input degradation
- Determinism
"""

from app.services.tech_stack import analyze_package_json, get_package_description


def _by_name(analysis):
    return {tech.name: tech for tech in analysis.tech_stack}


class TestManifestScenarios:
    """Reference manifests with known expected output."""

    def test_react_next_typescript(self) -> None:
        """React + Next.js + TypeScript yields frameworks, language and web type."""
        content = (
            '{"dependencies": {"react": "^18.0.0", "next": "^13.0.0"},'
            ' "devDependencies": {"typescript": "^5.0.0"}}'
        )

        result = analyze_package_json(content)
        techs = _by_name(result)

        assert techs["React"].category == "framework"
        assert techs["React"].confidence == 0.95
        assert techs["Next.js"].category == "framework"
        assert techs["Next.js"].confidence == 0.95
        assert techs["TypeScript"].category == "language"
        assert techs["TypeScript"].confidence == 0.9
        assert len(result.dependencies) == 3
        assert result.structure.language == "TypeScript"
        assert result.structure.framework == "Next.js"
        assert result.structure.type == "web"
        assert result.structure.has_typescript is True

    def test_empty_manifest(self) -> None:
        """An empty object yields no detections and the JavaScript default."""
        result = analyze_package_json("{}")

        assert result.tech_stack == []
        assert result.dependencies == []
        assert result.structure.language == "JavaScript"
        assert result.structure.type is None
        assert result.structure.framework is None


class TestManifestDependencies:
    """Tests for dependency record extraction."""

    def test_dependency_classes(self) -> None:
        """Records carry dev/optional flags from their class."""
        content = (
            '{"dependencies": {"express": "^4.18.0"},'
            ' "devDependencies": {"jest": "^29.0.0"},'
            ' "optionalDependencies": {"fsevents": "^2.3.0"}}'
        )

        result = analyze_package_json(content)
        records = {d.name: d for d in result.dependencies}

        assert records["express"].is_dev is False
        assert records["express"].is_optional is False
        assert records["jest"].is_dev is True
        assert records["fsevents"].is_optional is True
        assert records["fsevents"].is_dev is False

    def test_raw_version_range_kept(self) -> None:
        """Declared version ranges are preserved verbatim."""
        result = analyze_package_json('{"dependencies": {"lodash": "~4.17.21"}}')

        assert result.dependencies[0].version == "~4.17.21"

    def test_known_package_description(self) -> None:
        """Known packages get a static description, unknown ones an empty string."""
        result = analyze_package_json('{"dependencies": {"react": "18.0.0", "left-pad": "1.0.0"}}')
        records = {d.name: d for d in result.dependencies}

        assert records["react"].description == get_package_description("react")
        assert records["react"].description != ""
        assert records["left-pad"].description == ""

    def test_optional_dependencies_not_cataloged(self) -> None:
        """Optional dependencies produce records but no detections."""
        result = analyze_package_json('{"optionalDependencies": {"react": "18.0.0"}}')

        assert len(result.dependencies) == 1
        assert result.tech_stack == []

    def test_same_package_in_two_classes(self) -> None:
        """Records are never deduplicated across classes."""
        content = '{"dependencies": {"react": "18.0.0"}, "devDependencies": {"react": "18.2.0"}}'

        result = analyze_package_json(content)

        assert len(result.dependencies) == 2
        assert _by_name(result)["React"].version == "18.2.0"


class TestManifestCatalog:
    """Tests for catalog lookup and structure side effects."""

    def test_detection_carries_version(self) -> None:
        """Detections report the declared version string."""
        result = analyze_package_json('{"dependencies": {"express": "^4.18.0"}}')

        assert _by_name(result)["Express"].version == "^4.18.0"

    def test_alternate_trigger(self) -> None:
        """Angular is detected from @angular/core."""
        result = analyze_package_json('{"dependencies": {"@angular/core": "^17.0.0"}}')
        techs = _by_name(result)

        assert "Angular" in techs
        assert techs["Angular"].version == "^17.0.0"
        assert result.structure.framework == "Angular"

    def test_database_detection(self) -> None:
        """Database drivers are detected with the database category."""
        result = analyze_package_json('{"dependencies": {"pg": "^8.0.0", "redis": "^4.0.0"}}')
        techs = _by_name(result)

        assert techs["PostgreSQL"].category == "database"
        assert techs["Redis"].category == "database"

    def test_testing_tool_sets_has_tests(self) -> None:
        """A test runner marks the project as tested."""
        result = analyze_package_json('{"devDependencies": {"jest": "^29.0.0"}}')

        assert result.structure.has_tests is True
        assert "Jest" in _by_name(result)

    def test_linter_sets_has_linting(self) -> None:
        """ESLint marks the project as linted."""
        result = analyze_package_json('{"devDependencies": {"eslint": "^8.0.0"}}')

        assert result.structure.has_linting is True

    def test_library_without_framework(self) -> None:
        """Manifests without a web framework leave type unset."""
        result = analyze_package_json('{"dependencies": {"lodash": "4.17.21"}}')

        assert result.structure.type is None
        assert result.structure.language == "JavaScript"

    def test_package_manager_copied(self) -> None:
        """packageManager is copied verbatim."""
        result = analyze_package_json('{"packageManager": "pnpm@8.6.0"}')

        assert result.structure.package_manager == "pnpm@8.6.0"

    def test_confidences_in_bounds(self) -> None:
        """Every detection has confidence in [0, 1]."""
        content = (
            '{"dependencies": {"react": "1", "next": "1", "express": "1", "prisma": "1"},'
            ' "devDependencies": {"typescript": "1", "jest": "1", "vite": "1"}}'
        )

        result = analyze_package_json(content)

        assert result.tech_stack
        assert all(0 <= tech.confidence <= 1 for tech in result.tech_stack)


class TestManifestMalformedInput:
    """Malformed manifests degrade to an empty result without raising."""

    def test_invalid_json(self) -> None:
        """Non-JSON text returns an empty analysis."""
        result = analyze_package_json("{not valid json")

        assert result.tech_stack == []
        assert result.dependencies == []
        assert result.structure.is_empty()

    def test_non_object_root(self) -> None:
        """A JSON array root returns an empty analysis."""
        result = analyze_package_json('["react"]')

        assert result.tech_stack == []
        assert result.structure.is_empty()

    def test_dependencies_not_a_mapping(self) -> None:
        """A dependency class that is not an object returns an empty analysis."""
        result = analyze_package_json('{"dependencies": ["react"]}')

        assert result.tech_stack == []
        assert result.dependencies == []
        assert result.structure.is_empty()

    def test_empty_string(self) -> None:
        """Empty text returns an empty analysis."""
        result = analyze_package_json("")

        assert result.tech_stack == []
        assert result.structure.is_empty()

    def test_oversized_integer_literal(self) -> None:
        """An integer literal beyond the int conversion limit returns an empty analysis."""
        result = analyze_package_json('{"dependencies": {"react": ' + "1" * 5000 + "}}")

        assert result.tech_stack == []
        assert result.dependencies == []
        assert result.structure.is_empty()

    def test_deeply_nested_json(self) -> None:
        """Nesting deeper than the recursion limit returns an empty analysis."""
        result = analyze_package_json("[" * 100000 + "]" * 100000)

        assert result.tech_stack == []
        assert result.structure.is_empty()

    def test_malformed_input_logs_warning(self, caplog) -> None:
        """Parse failures are logged as warnings."""
        with caplog.at_level("WARNING"):
            analyze_package_json("{oops")

        assert any("package.json" in r.message for r in caplog.records)


class TestManifestDeterminism:
    """The analyzer is a pure function of its input."""

    def test_idempotent(self) -> None:
        """Two runs on identical input produce equal output."""
        content = (
            '{"dependencies": {"vue": "^3.0.0", "mongoose": "^7.0.0"},'
            ' "devDependencies": {"vitest": "^1.0.0", "typescript": "^5.0.0"}}'
        )

        assert analyze_package_json(content) == analyze_package_json(content)
