"""
Signature catalog for tech stack detection.

Static tables mapping recognizable signals (dependency names, file names,
file extensions, content substrings) to technology descriptors. Analyzer
logic consults these through a single lookup per table; adding a technology
means adding a row here, not a branch in an analyzer.

All tables are immutable (tuples / MappingProxyType) and shared process-wide.
"""

from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class TechDescriptor:
    """Fixed description of a technology emitted on a signature match."""

    name: str
    category: str
    confidence: float
    description: str = ""


@dataclass(frozen=True)
class DependencySignature:
    """Manifest dependency name(s) that identify a technology."""

    triggers: tuple[str, ...]  # First present trigger supplies the version
    tech: TechDescriptor
    sets_framework: bool = False  # Sets structure.framework and type="web"
    marks_tests: bool = False
    marks_linting: bool = False
    marks_typescript: bool = False


@dataclass(frozen=True)
class ConfigFileSignature:
    """Recognized configuration file name(s) and what their presence implies."""

    files: tuple[str, ...]
    detections: tuple[TechDescriptor, ...] = ()
    language: str | None = None
    has_typescript: bool = False


@dataclass(frozen=True)
class ContentSignature:
    """Case-insensitive substrings, or a declared package name, that hint at a technology."""

    needles: tuple[str, ...]
    tech: TechDescriptor
    files: tuple[str, ...] = ()  # Restrict to these config files (config scan only)
    sets_framework: bool = False
    package: str = ""  # Declared Python dependency name; matched by name, not by needles


# ─────────────────────────────────────────────────────────────
# Confidence Levels
# ─────────────────────────────────────────────────────────────

# Upper bound for any merged (corroborated) detection
MAX_MERGED_CONFIDENCE = 0.95
# Bonus added to the mean confidence when several detectors agree
CORROBORATION_BONUS = 0.1

# Extension-based language promotion
MIN_LANGUAGE_FILES = 3
LANGUAGE_BASE_CONFIDENCE = 0.5
LANGUAGE_CONFIDENCE_PER_FILE = 0.05
LANGUAGE_MAX_CONFIDENCE = 0.9


# ─────────────────────────────────────────────────────────────
# Manifest (package.json) Signatures
# ─────────────────────────────────────────────────────────────

MANIFEST_FILE = "package.json"

# Dependency classes: (manifest key, is_dev, is_optional)
DEPENDENCY_CLASSES: tuple[tuple[str, bool, bool], ...] = (
    ("dependencies", False, False),
    ("devDependencies", True, False),
    ("optionalDependencies", False, True),
)

TYPESCRIPT = TechDescriptor("TypeScript", "language", 0.9, "Typed superset of JavaScript")
JAVASCRIPT_LANGUAGE = "JavaScript"

# Order matters: later framework matches override structure.framework
MANIFEST_SIGNATURES: tuple[DependencySignature, ...] = (
    # Backend frameworks
    DependencySignature(
        ("express",),
        TechDescriptor(
            "Express", "framework", 0.9, "Fast, unopinionated, minimalist web framework for Node.js"
        ),
        sets_framework=True,
    ),
    DependencySignature(
        ("fastify",),
        TechDescriptor("Fastify", "framework", 0.9, "Fast and low overhead web framework"),
        sets_framework=True,
    ),
    DependencySignature(
        ("koa",),
        TechDescriptor("Koa", "framework", 0.85, "Expressive middleware for Node.js"),
        sets_framework=True,
    ),
    DependencySignature(
        ("@nestjs/core",),
        TechDescriptor("NestJS", "framework", 0.85, "Progressive Node.js server-side framework"),
        sets_framework=True,
    ),
    # Frontend frameworks
    DependencySignature(
        ("react",),
        TechDescriptor(
            "React", "framework", 0.95, "JavaScript library for building user interfaces"
        ),
        sets_framework=True,
    ),
    DependencySignature(
        ("next",),
        TechDescriptor("Next.js", "framework", 0.95, "React framework for production"),
        sets_framework=True,
    ),
    DependencySignature(
        ("vue",),
        TechDescriptor("Vue.js", "framework", 0.95, "Progressive JavaScript framework"),
        sets_framework=True,
    ),
    DependencySignature(
        ("nuxt",),
        TechDescriptor("Nuxt.js", "framework", 0.95, "Vue.js framework for server-side rendering"),
        sets_framework=True,
    ),
    DependencySignature(
        ("angular", "@angular/core"),
        TechDescriptor(
            "Angular",
            "framework",
            0.95,
            "Platform for building mobile and desktop web applications",
        ),
        sets_framework=True,
    ),
    DependencySignature(
        ("svelte",),
        TechDescriptor("Svelte", "framework", 0.95, "Cybernetically enhanced web apps"),
        sets_framework=True,
    ),
    # Language
    DependencySignature(("typescript",), TYPESCRIPT, marks_typescript=True),
    # Styling
    DependencySignature(
        ("tailwindcss",),
        TechDescriptor("Tailwind CSS", "library", 0.9, "Utility-first CSS framework"),
    ),
    DependencySignature(
        ("styled-components",),
        TechDescriptor(
            "Styled Components", "library", 0.9, "CSS-in-JS library for styling React components"
        ),
    ),
    DependencySignature(
        ("sass",),
        TechDescriptor("Sass", "styling", 0.7, "CSS extension language"),
    ),
    DependencySignature(
        ("less",),
        TechDescriptor("Less", "styling", 0.7, "Backwards-compatible CSS extension language"),
    ),
    # Data
    DependencySignature(
        ("prisma", "@prisma/client"),
        TechDescriptor("Prisma", "tool", 0.9, "Next-generation ORM for Node.js and TypeScript"),
    ),
    DependencySignature(
        ("mongoose",),
        TechDescriptor("Mongoose", "library", 0.9, "MongoDB object modeling for Node.js"),
    ),
    DependencySignature(
        ("mongodb", "mongoose"),
        TechDescriptor("MongoDB", "database", 0.85, "Document-oriented NoSQL database"),
    ),
    DependencySignature(
        ("pg", "postgres"),
        TechDescriptor("PostgreSQL", "database", 0.85, "Open source relational database"),
    ),
    DependencySignature(
        ("redis", "ioredis"),
        TechDescriptor("Redis", "database", 0.85, "In-memory data store"),
    ),
    # Build tools
    DependencySignature(
        ("webpack",),
        TechDescriptor("Webpack", "build", 0.8, "Module bundler"),
    ),
    DependencySignature(
        ("vite",),
        TechDescriptor("Vite", "build", 0.8, "Next generation frontend tooling"),
    ),
    DependencySignature(
        ("rollup",),
        TechDescriptor("Rollup", "build", 0.8, "Module bundler for JavaScript libraries"),
    ),
    # Testing
    DependencySignature(
        ("jest",),
        TechDescriptor("Jest", "tool", 0.8, "JavaScript testing framework"),
        marks_tests=True,
    ),
    DependencySignature(
        ("vitest",),
        TechDescriptor("Vitest", "tool", 0.8, "Fast unit test framework powered by Vite"),
        marks_tests=True,
    ),
    DependencySignature(
        ("mocha",),
        TechDescriptor("Mocha", "tool", 0.8, "Feature-rich JavaScript test framework"),
        marks_tests=True,
    ),
    DependencySignature(
        ("cypress",),
        TechDescriptor("Cypress", "testing", 0.8, "End-to-end testing for the web"),
        marks_tests=True,
    ),
    DependencySignature(
        ("@playwright/test", "playwright"),
        TechDescriptor("Playwright", "testing", 0.8, "Cross-browser end-to-end testing"),
        marks_tests=True,
    ),
    # Linting / formatting
    DependencySignature(
        ("eslint",),
        TechDescriptor("ESLint", "tool", 0.8, "JavaScript linting utility"),
        marks_linting=True,
    ),
    DependencySignature(
        ("prettier",),
        TechDescriptor("Prettier", "tool", 0.8, "Code formatter"),
        marks_linting=True,
    ),
    DependencySignature(
        ("@biomejs/biome",),
        TechDescriptor("Biome", "tool", 0.8, "Toolchain for web projects: formatter and linter"),
        marks_linting=True,
    ),
)

# Short human-readable descriptions for dependency records
PACKAGE_DESCRIPTIONS: MappingProxyType[str, str] = MappingProxyType(
    {
        "react": "JavaScript library for building user interfaces",
        "next": "React framework for production",
        "vue": "Progressive JavaScript framework",
        "angular": "Platform for building mobile and desktop web applications",
        "typescript": "Typed superset of JavaScript",
        "tailwindcss": "Utility-first CSS framework",
        "prisma": "Next-generation ORM for Node.js and TypeScript",
        "jest": "JavaScript testing framework",
        "express": "Fast, unopinionated, minimalist web framework for Node.js",
        "axios": "Promise-based HTTP client",
        "lodash": "JavaScript utility library",
        "moment": "JavaScript date library",
        "react-router": "Declarative routing for React",
        "redux": "Predictable state container for JavaScript apps",
        "socket.io": "Real-time bidirectional event-based communication",
        "nodemon": "Automatically restart Node.js application",
        "eslint": "JavaScript linting utility",
        "prettier": "Code formatter",
        "webpack": "Module bundler",
        "vite": "Next generation frontend tooling",
        "babel": "JavaScript compiler",
    }
)


# ─────────────────────────────────────────────────────────────
# Auxiliary Configuration Files
# ─────────────────────────────────────────────────────────────

# Evaluated in order; a later row's language overrides an earlier one
CONFIG_FILE_SIGNATURES: tuple[ConfigFileSignature, ...] = (
    ConfigFileSignature(
        files=("requirements.txt", "pyproject.toml", "Pipfile", "setup.py"),
        language="Python",
        detections=(TechDescriptor("Python", "language", 0.9, "General-purpose programming language"),),
    ),
    ConfigFileSignature(
        files=("Cargo.toml",),
        language="Rust",
        detections=(
            TechDescriptor("Rust", "language", 0.95, "Systems programming language"),
            TechDescriptor("Cargo", "build", 0.95, "Rust package manager"),
        ),
    ),
    ConfigFileSignature(
        files=("go.mod",),
        language="Go",
        detections=(
            TechDescriptor("Go", "language", 0.95, "Programming language developed by Google"),
        ),
    ),
    ConfigFileSignature(
        files=("Gemfile",),
        language="Ruby",
        detections=(
            TechDescriptor("Ruby", "language", 0.95, "Dynamic programming language"),
            TechDescriptor("Bundler", "build", 0.95, "Ruby package manager"),
        ),
    ),
    ConfigFileSignature(
        files=("pom.xml", "build.gradle", "build.gradle.kts"),
        language="Java",
        detections=(
            TechDescriptor("Java", "language", 0.95, "Object-oriented programming language"),
        ),
    ),
    ConfigFileSignature(
        files=("pom.xml",),
        detections=(TechDescriptor("Maven", "tool", 0.9, "Build automation tool for Java"),),
    ),
    ConfigFileSignature(
        files=("build.gradle", "build.gradle.kts"),
        detections=(TechDescriptor("Gradle", "tool", 0.9, "Build automation tool"),),
    ),
    ConfigFileSignature(
        files=("composer.json",),
        language="PHP",
        detections=(
            TechDescriptor("PHP", "language", 0.95, "Server-side scripting language"),
            TechDescriptor("Composer", "build", 0.95, "PHP package manager"),
        ),
    ),
    ConfigFileSignature(
        files=("Dockerfile", "docker-compose.yml", "docker-compose.yaml"),
        detections=(TechDescriptor("Docker", "tool", 0.9, "Containerization platform"),),
    ),
    ConfigFileSignature(
        files=("docker-compose.yml", "docker-compose.yaml"),
        detections=(
            TechDescriptor(
                "Docker Compose", "infrastructure", 0.9, "Multi-container application definitions"
            ),
        ),
    ),
    ConfigFileSignature(
        files=("tsconfig.json",),
        language="TypeScript",
        has_typescript=True,
        detections=(TYPESCRIPT,),
    ),
    ConfigFileSignature(
        files=("vercel.json", "now.json"),
        detections=(TechDescriptor("Vercel", "service", 0.9, "Frontend deployment platform"),),
    ),
    ConfigFileSignature(
        files=("netlify.toml",),
        detections=(TechDescriptor("Netlify", "service", 0.9, "JAMstack deployment platform"),),
    ),
    ConfigFileSignature(
        files=("fly.toml",),
        detections=(TechDescriptor("Fly.io", "service", 0.9, "Application hosting platform"),),
    ),
    ConfigFileSignature(
        files=(".github/workflows",),
        detections=(
            TechDescriptor("GitHub Actions", "cicd", 0.95, "CI/CD platform integrated with GitHub"),
        ),
    ),
    ConfigFileSignature(
        files=(".gitlab-ci.yml",),
        detections=(TechDescriptor("GitLab CI", "cicd", 0.9, "GitLab continuous integration"),),
    ),
    ConfigFileSignature(
        files=("Jenkinsfile",),
        detections=(TechDescriptor("Jenkins", "cicd", 0.9, "Automation server for CI/CD"),),
    ),
    ConfigFileSignature(
        files=(".circleci/config.yml",),
        detections=(TechDescriptor("CircleCI", "cicd", 0.9, "Hosted continuous integration"),),
    ),
)

# First present file wins
BUILD_TOOL_FILES: tuple[tuple[str, str], ...] = (
    ("pom.xml", "Maven"),
    ("build.gradle", "Gradle"),
    ("build.gradle.kts", "Gradle"),
)

# First present lockfile wins
LOCKFILE_PACKAGE_MANAGERS: tuple[tuple[str, str], ...] = (
    ("pnpm-lock.yaml", "pnpm"),
    ("yarn.lock", "yarn"),
    ("bun.lockb", "bun"),
    ("package-lock.json", "npm"),
)

CI_MARKERS: tuple[str, ...] = (
    ".github/workflows",
    ".gitlab-ci.yml",
    "Jenkinsfile",
    ".circleci/config.yml",
)


# ─────────────────────────────────────────────────────────────
# Source Content Signatures
# ─────────────────────────────────────────────────────────────

EXTENSION_LANGUAGES: MappingProxyType[str, str] = MappingProxyType(
    {
        "js": "JavaScript",
        "jsx": "JavaScript",
        "mjs": "JavaScript",
        "cjs": "JavaScript",
        "ts": "TypeScript",
        "tsx": "TypeScript",
        "py": "Python",
        "java": "Java",
        "kt": "Kotlin",
        "scala": "Scala",
        "go": "Go",
        "rs": "Rust",
        "c": "C",
        "h": "C",
        "cpp": "C++",
        "cxx": "C++",
        "cc": "C++",
        "hpp": "C++",
        "cs": "C#",
        "php": "PHP",
        "rb": "Ruby",
        "swift": "Swift",
        "dart": "Dart",
        "elm": "Elm",
        "clj": "Clojure",
        "cljs": "Clojure",
    }
)

# Lower confidence than declared dependencies: substring matches are guesses
CONTENT_SIGNATURES: tuple[ContentSignature, ...] = (
    ContentSignature(
        ("import react", "from 'react'", 'from "react"'),
        TechDescriptor("React", "framework", 0.8, "JavaScript library for building user interfaces"),
    ),
    ContentSignature(
        ("<template>", "from 'vue'", 'from "vue"'),
        TechDescriptor("Vue.js", "framework", 0.8, "Progressive JavaScript framework"),
    ),
    ContentSignature(
        ("from 'next/", 'from "next/'),
        TechDescriptor("Next.js", "framework", 0.7, "React framework for production"),
    ),
    ContentSignature(
        ("@angular/core",),
        TechDescriptor(
            "Angular",
            "framework",
            0.7,
            "Platform for building mobile and desktop web applications",
        ),
    ),
    ContentSignature(
        ("require('express')", 'require("express")', "from 'express'", 'from "express"'),
        TechDescriptor(
            "Express", "framework", 0.7, "Fast, unopinionated, minimalist web framework for Node.js"
        ),
    ),
    ContentSignature(
        ("from fastapi", "import fastapi"),
        TechDescriptor("FastAPI", "framework", 0.7, "Modern Python web framework"),
    ),
    ContentSignature(
        ("from django", "import django"),
        TechDescriptor("Django", "framework", 0.7, "High-level Python web framework"),
    ),
    ContentSignature(
        ("from flask", "import flask"),
        TechDescriptor("Flask", "framework", 0.7, "Python micro web framework"),
    ),
    ContentSignature(
        ("from sqlalchemy", "import sqlalchemy"),
        TechDescriptor("SQLAlchemy", "library", 0.6, "Python SQL toolkit and ORM"),
    ),
    ContentSignature(
        ("from pydantic", "import pydantic"),
        TechDescriptor("Pydantic", "library", 0.6, "Data validation using Python type hints"),
    ),
)

_PYTHON_MANIFESTS = ("requirements.txt", "pyproject.toml", "Pipfile", "setup.py")
_JVM_BUILD_FILES = ("pom.xml", "build.gradle", "build.gradle.kts")

# Framework markers inside non-JavaScript manifests
CONFIG_CONTENT_SIGNATURES: tuple[ContentSignature, ...] = (
    ContentSignature(
        (),
        TechDescriptor("Django", "framework", 0.9, "High-level Python web framework"),
        files=_PYTHON_MANIFESTS,
        sets_framework=True,
        package="django",
    ),
    ContentSignature(
        (),
        TechDescriptor("Flask", "framework", 0.9, "Python micro web framework"),
        files=_PYTHON_MANIFESTS,
        sets_framework=True,
        package="flask",
    ),
    ContentSignature(
        (),
        TechDescriptor("FastAPI", "framework", 0.9, "Modern Python web framework"),
        files=_PYTHON_MANIFESTS,
        sets_framework=True,
        package="fastapi",
    ),
    ContentSignature(
        ("github.com/gin-gonic/gin",),
        TechDescriptor("Gin", "framework", 0.9, "Go web framework"),
        files=("go.mod",),
        sets_framework=True,
    ),
    ContentSignature(
        ("github.com/labstack/echo",),
        TechDescriptor("Echo", "framework", 0.9, "Go web framework"),
        files=("go.mod",),
        sets_framework=True,
    ),
    ContentSignature(
        ("github.com/gofiber/fiber",),
        TechDescriptor("Fiber", "framework", 0.9, "Express-inspired Go web framework"),
        files=("go.mod",),
        sets_framework=True,
    ),
    ContentSignature(
        ("actix-web",),
        TechDescriptor("Actix Web", "framework", 0.9, "Rust web framework"),
        files=("Cargo.toml",),
        sets_framework=True,
    ),
    ContentSignature(
        ("axum =", '"axum"'),
        TechDescriptor("Axum", "framework", 0.9, "Rust web framework built on Tokio"),
        files=("Cargo.toml",),
        sets_framework=True,
    ),
    ContentSignature(
        ("warp =", '"warp"'),
        TechDescriptor("Warp", "framework", 0.9, "Rust web framework"),
        files=("Cargo.toml",),
        sets_framework=True,
    ),
    ContentSignature(
        ("spring-boot", "springframework"),
        TechDescriptor("Spring Boot", "framework", 0.9, "Java application framework"),
        files=_JVM_BUILD_FILES,
        sets_framework=True,
    ),
    ContentSignature(
        ("gem 'rails'", 'gem "rails"'),
        TechDescriptor("Ruby on Rails", "framework", 0.9, "Ruby web framework"),
        files=("Gemfile",),
        sets_framework=True,
    ),
    ContentSignature(
        ("gem 'sinatra'", 'gem "sinatra"'),
        TechDescriptor("Sinatra", "framework", 0.9, "Ruby micro web framework"),
        files=("Gemfile",),
        sets_framework=True,
    ),
    ContentSignature(
        ("laravel/framework",),
        TechDescriptor("Laravel", "framework", 0.9, "PHP web framework"),
        files=("composer.json",),
        sets_framework=True,
    ),
    ContentSignature(
        ("symfony/framework-bundle",),
        TechDescriptor("Symfony", "framework", 0.9, "PHP web framework"),
        files=("composer.json",),
        sets_framework=True,
    ),
)


# ─────────────────────────────────────────────────────────────
# File Classification
# ─────────────────────────────────────────────────────────────

MANIFEST_FILE_NAMES: frozenset[str] = frozenset(
    {
        "package.json",
        "requirements.txt",
        "pyproject.toml",
        "Pipfile",
        "Cargo.toml",
        "go.mod",
        "Gemfile",
        "composer.json",
        "pom.xml",
    }
)

# Checked in order after the manifest check; first match wins
FILE_TYPE_RULES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("ci", (".github/", ".gitlab-ci", "jenkinsfile", ".circleci/")),
    (
        "config",
        ("config", "dockerfile", "docker-compose", ".json", ".toml", ".yml", ".yaml", ".lock"),
    ),
    ("test", ("test", "spec")),
    ("documentation", ("readme", "docs", ".md", ".rst")),
)

# (lowercase substring, importance); manifests score 1.0, unmatched files DEFAULT_IMPORTANCE
FILE_IMPORTANCE_RULES: tuple[tuple[str, float], ...] = (
    ("readme", 0.9),
    ("dockerfile", 0.8),
    ("docker-compose", 0.8),
    ("tsconfig.json", 0.7),
    ("next.config", 0.7),
)
MANIFEST_IMPORTANCE = 1.0
DEFAULT_IMPORTANCE = 0.5


# ─────────────────────────────────────────────────────────────
# Structural Path Scan
# ─────────────────────────────────────────────────────────────

DOC_DIR_MARKERS: tuple[str, ...] = ("docs/", "documentation/", "doc/")
TEST_PATH_MARKERS: tuple[str, ...] = (
    "test/",
    "tests/",
    "__tests__/",
    "spec/",
    "specs/",
    ".test.",
    ".spec.",
)
CI_PATH_MARKERS: tuple[str, ...] = (".github/workflows/", ".gitlab-ci.yml", ".circleci/")


# ─────────────────────────────────────────────────────────────
# Architecture Patterns
# ─────────────────────────────────────────────────────────────

MONOREPO_DIRS: tuple[str, ...] = ("packages", "apps", "libs")
FRONTEND_DIRS: tuple[str, ...] = ("frontend", "client", "web", "app")
BACKEND_DIRS: tuple[str, ...] = ("backend", "server", "api")
MIN_SERVICE_DIRS = 3

REST_API_FRAMEWORKS: frozenset[str] = frozenset(
    {
        "Express",
        "Fastify",
        "Koa",
        "NestJS",
        "FastAPI",
        "Flask",
        "Django",
        "Gin",
        "Echo",
        "Fiber",
        "Actix Web",
        "Axum",
        "Warp",
        "Spring Boot",
        "Laravel",
        "Symfony",
    }
)
STATIC_SITE_FRAMEWORKS: frozenset[str] = frozenset({"Next.js", "Nuxt.js", "Svelte"})
STATIC_HOSTING_SERVICES: frozenset[str] = frozenset({"Vercel", "Netlify"})
