"""
Tests for source content scanning.

Tests cover:
- Byte-weighted primary language inference
- Language promotion by file count
- Substring signatures in source files
- Framework markers in non-JavaScript manifests
"""

import pytest

from app.services.tech_stack import (
    SourceFile,
    detect_languages,
    infer_primary_language,
    scan_config_content,
    scan_source_content,
)


def make_source_file(path: str, content: str = "", size: int | None = None) -> SourceFile:
    return SourceFile(path=path, content=content, size=len(content) if size is None else size)


class TestInferPrimaryLanguage:
    """Primary language is the one with the most bytes."""

    def test_python_majority(self) -> None:
        """Five .py files outweigh one .js file."""
        files = [make_source_file(f"pkg/mod{i}.py", "x = 1\n" * 20) for i in range(5)]
        files.append(make_source_file("static/app.js", "let x = 1;\n"))

        assert infer_primary_language(files) == "Python"

    def test_bytes_beat_file_count(self) -> None:
        """One large file outweighs several small ones."""
        files = [
            make_source_file("a.py", size=10),
            make_source_file("b.py", size=10),
            make_source_file("main.go", size=1000),
        ]

        assert infer_primary_language(files) == "Go"

    def test_tie_goes_to_first_encountered(self) -> None:
        """Equal byte totals resolve to the first language seen."""
        files = [make_source_file("lib.rs", size=100), make_source_file("main.go", size=100)]

        assert infer_primary_language(files) == "Rust"

    def test_extension_case_insensitive(self) -> None:
        """Upper-case extensions map like lower-case ones."""
        assert infer_primary_language([make_source_file("Main.JAVA", size=5)]) == "Java"

    def test_no_known_extensions(self) -> None:
        """Unmapped extensions yield None."""
        files = [make_source_file("README.md", size=50), make_source_file("Makefile", size=20)]

        assert infer_primary_language(files) is None

    def test_empty(self) -> None:
        """No files yields None."""
        assert infer_primary_language([]) is None


class TestDetectLanguages:
    """Languages need three files to be promoted."""

    def test_promotion_threshold(self) -> None:
        """Python with 5 files is promoted, JavaScript with 1 is not."""
        files = [make_source_file(f"m{i}.py", "pass") for i in range(5)]
        files.append(make_source_file("app.js", "1"))

        detections = {d.name: d for d in detect_languages(files)}

        assert "Python" in detections
        assert "JavaScript" not in detections
        assert detections["Python"].category == "language"
        assert detections["Python"].confidence == pytest.approx(0.75)

    def test_confidence_capped(self) -> None:
        """Confidence never exceeds 0.9."""
        files = [make_source_file(f"m{i}.ts", "") for i in range(40)]

        (detection,) = detect_languages(files)

        assert detection.name == "TypeScript"
        assert detection.confidence == 0.9

    def test_exactly_three_files(self) -> None:
        """Three files are enough."""
        files = [make_source_file(f"m{i}.rb", "") for i in range(3)]

        assert [d.name for d in detect_languages(files)] == ["Ruby"]


class TestScanSourceContent:
    """Signature substrings in source contents."""

    def test_react_import(self) -> None:
        """A React import yields React at the lower content confidence."""
        files = [make_source_file("src/App.jsx", "import React from 'react';\n")]

        detections = {d.name: d for d in scan_source_content(files)}

        assert detections["React"].confidence == 0.8
        assert detections["React"].category == "framework"

    def test_case_insensitive(self) -> None:
        """Matching ignores case."""
        files = [make_source_file("main.py", "FROM FastAPI IMPORT FastAPI")]

        assert "FastAPI" in {d.name for d in scan_source_content(files)}

    def test_known_names_skipped(self) -> None:
        """Technologies already known are not re-emitted."""
        files = [make_source_file("src/App.jsx", "import React from 'react';")]

        assert scan_source_content(files, known={"React"}) == []

    def test_single_detection_per_signature(self) -> None:
        """Many matching files still emit one detection."""
        files = [make_source_file(f"c{i}.vue", "<template><div/></template>") for i in range(4)]

        names = [d.name for d in scan_source_content(files)]

        assert names.count("Vue.js") == 1

    def test_no_match(self) -> None:
        """Unrelated content yields nothing."""
        files = [make_source_file("util.c", "int main(void) { return 0; }")]

        assert scan_source_content(files) == []


class TestScanConfigContent:
    """Framework markers inside ecosystem manifests."""

    def test_django_requirements(self) -> None:
        """Django in requirements.txt sets framework and web type."""
        result = scan_config_content({"requirements.txt": "Django==4.2\npsycopg2"})

        assert [d.name for d in result.tech_stack] == ["Django"]
        assert result.structure.framework == "Django"
        assert result.structure.type == "web"

    def test_gin_go_mod(self) -> None:
        """Gin in go.mod is detected."""
        content = "module app\n\nrequire github.com/gin-gonic/gin v1.9.1\n"

        result = scan_config_content({"go.mod": content})

        assert result.structure.framework == "Gin"

    def test_spring_boot_gradle(self) -> None:
        """Spring Boot in build.gradle is detected."""
        content = "plugins { id 'org.springframework.boot' version '3.2.0' }"

        result = scan_config_content({"build.gradle": content})

        assert "Spring Boot" in {d.name for d in result.tech_stack}

    def test_rails_gemfile(self) -> None:
        """gem 'rails' in Gemfile is detected."""
        result = scan_config_content({"Gemfile": "gem 'rails', '~> 7.0'"})

        assert result.structure.framework == "Ruby on Rails"

    def test_marker_in_wrong_file_ignored(self) -> None:
        """Markers only count inside their own manifest type."""
        result = scan_config_content({"go.mod": "// django fastapi flask"})

        assert result.tech_stack == []
        assert result.structure.is_empty()

    def test_framework_in_description_ignored(self) -> None:
        """A framework named in prose is not a declared dependency."""
        content = (
            '[project]\nname = "api"\n'
            'description = "Port of our old Flask app to Starlette"\n'
            'dependencies = ["starlette>=0.37"]\n'
        )

        result = scan_config_content({"pyproject.toml": content})

        assert result.tech_stack == []
        assert result.structure.is_empty()

    def test_requirements_comment_ignored(self) -> None:
        """Comments in requirements.txt do not declare packages."""
        result = scan_config_content({"requirements.txt": "# migrated off django\nstarlette\n"})

        assert result.tech_stack == []

    def test_requirements_similar_name_ignored(self) -> None:
        """Packages that merely start with a framework name do not match."""
        result = scan_config_content({"requirements.txt": "flask-cors==4.0\n"})

        assert result.tech_stack == []

    def test_pyproject_pep621_dependency(self) -> None:
        """A PEP 621 dependency entry is detected."""
        content = '[project]\ndependencies = ["fastapi>=0.110", "uvicorn"]\n'

        result = scan_config_content({"pyproject.toml": content})

        assert result.structure.framework == "FastAPI"

    def test_pipfile_assignment(self) -> None:
        """A Pipfile package assignment is detected."""
        result = scan_config_content({"Pipfile": '[packages]\nflask = "*"\n'})

        assert result.structure.framework == "Flask"

    def test_warp_crate(self) -> None:
        """warp in Cargo.toml dependencies is detected."""
        result = scan_config_content({"Cargo.toml": '[dependencies]\nwarp = "0.3"\n'})

        assert result.structure.framework == "Warp"

    def test_warp_prefixed_crate_ignored(self) -> None:
        """Crates whose names merely start with warp do not match."""
        result = scan_config_content({"Cargo.toml": '[dependencies]\nwarpgate = "0.1"\n'})

        assert result.tech_stack == []

    def test_absent_files(self) -> None:
        """None contents are skipped."""
        result = scan_config_content({"requirements.txt": None})

        assert result.tech_stack == []

    def test_known_skipped(self) -> None:
        """Known frameworks are not re-emitted."""
        result = scan_config_content({"requirements.txt": "flask"}, known={"Flask"})

        assert result.tech_stack == []
