"""
Data types for tech stack analysis.

These dataclasses flow between the analyzers, the aggregator and the
structure synthesizer. API-facing pydantic schemas live in
app/schemas/analysis.py and are built from these.
"""

from dataclasses import dataclass, field, fields
from typing import Literal

ProjectType = Literal["web", "mobile", "desktop", "cli", "library", "unknown"]
FileType = Literal["package", "config", "source", "test", "documentation", "ci"]


@dataclass
class TechnologyDetection:
    """A single detected technology."""

    name: str
    category: str  # "framework", "library", "tool", "language", "database", ...
    confidence: float  # 0-1
    version: str | None = None
    description: str | None = None

    def __post_init__(self) -> None:
        self.confidence = min(1.0, max(0.0, float(self.confidence)))

    @property
    def identity(self) -> tuple[str, str]:
        """Deduplication key."""
        return (self.name, self.category)


@dataclass
class DependencyRecord:
    """One declared dependency edge from a manifest."""

    name: str
    version: str  # Raw declared range, e.g. "^18.0.0"
    is_dev: bool = False
    is_optional: bool = False
    description: str = ""


@dataclass
class StructureHints:
    """
    Partial ProjectStructure contributed by one analyzer.

    None means "no opinion". Scalars are applied last-write-wins,
    boolean flags are OR-combined.
    """

    type: ProjectType | None = None
    framework: str | None = None
    language: str | None = None
    build_tool: str | None = None
    package_manager: str | None = None
    has_tests: bool | None = None
    has_documentation: bool | None = None
    has_ci: bool | None = None
    has_linting: bool | None = None
    has_typescript: bool | None = None

    def as_dict(self) -> dict[str, str | bool]:
        """Return only the fields this analyzer actually set."""
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}

    def is_empty(self) -> bool:
        return not self.as_dict()


@dataclass
class ProjectStructure:
    """Fully resolved project structure."""

    type: ProjectType = "unknown"
    language: str = "unknown"
    framework: str | None = None
    build_tool: str | None = None
    package_manager: str | None = None
    has_tests: bool = False
    has_documentation: bool = False
    has_ci: bool = False
    has_linting: bool = False
    has_typescript: bool = False


@dataclass
class DetectedFile:
    """A recognized file with its classification."""

    path: str
    type: FileType
    importance: float  # 0-1


@dataclass
class SourceFile:
    """Source file handed to the content scanner."""

    path: str
    content: str
    size: int


@dataclass
class RepositoryInfo:
    """Repository metadata supplied by the caller, passed through unchanged."""

    name: str = ""
    full_name: str = ""
    description: str | None = None
    html_url: str | None = None
    language: str | None = None
    stars: int = 0
    forks: int = 0
    default_branch: str = "main"
    updated_at: str | None = None


@dataclass
class ManifestAnalysis:
    """Output of the manifest analyzer."""

    tech_stack: list[TechnologyDetection] = field(default_factory=list)
    dependencies: list[DependencyRecord] = field(default_factory=list)
    structure: StructureHints = field(default_factory=StructureHints)


@dataclass
class ConfigAnalysis:
    """Output of the auxiliary config analyzer and the config content scan."""

    tech_stack: list[TechnologyDetection] = field(default_factory=list)
    structure: StructureHints = field(default_factory=StructureHints)


@dataclass(frozen=True)
class AnalysisResult:
    """Aggregate result of one analysis run. Never mutated after creation."""

    repository: RepositoryInfo
    tech_stack: tuple[TechnologyDetection, ...]
    dependencies: tuple[DependencyRecord, ...]
    structure: ProjectStructure
    detected_files: tuple[DetectedFile, ...]
    patterns: tuple[str, ...]
    primary_language: str | None
    summary: str
