"""Pydantic schemas for the tech stack analysis API.

Request models describe the already-fetched repository files; response
models mirror the AnalysisResult dataclasses of app.services.tech_stack and
are built from them with from_attributes.
"""

from pydantic import BaseModel, ConfigDict, Field

from app.services.tech_stack import RepositoryInfo, SourceFile

# ─────────────────────────────────────────────────────────────
# Request Models
# ─────────────────────────────────────────────────────────────


class RepositoryInput(BaseModel):
    """Repository metadata supplied by the caller."""

    name: str = Field(default="", description="Repository name, e.g., 'storefront'")
    full_name: str = Field(default="", description="Owner-qualified name, e.g., 'acme/storefront'")
    description: str | None = Field(default=None, description="Repository description")
    html_url: str | None = Field(default=None, description="Web URL of the repository")
    language: str | None = Field(default=None, description="Host-reported primary language")
    stars: int = Field(default=0, ge=0, description="Star count")
    forks: int = Field(default=0, ge=0, description="Fork count")
    default_branch: str = Field(default="main", description="Default branch name")
    updated_at: str | None = Field(default=None, description="ISO 8601 last update time")

    def to_info(self) -> RepositoryInfo:
        return RepositoryInfo(**self.model_dump())


class SourceFileInput(BaseModel):
    """One source file for content scanning."""

    path: str = Field(description="Repository-relative path, e.g., 'src/app.py'")
    content: str = Field(default="", description="File text")
    size: int | None = Field(
        default=None, ge=0, description="Size in bytes; defaults to the UTF-8 length of content"
    )

    def to_source_file(self) -> SourceFile:
        size = self.size if self.size is not None else len(self.content.encode("utf-8"))
        return SourceFile(path=self.path, content=self.content, size=size)


class AnalysisRequest(BaseModel):
    """Request body for a full repository analysis."""

    repository: RepositoryInput = Field(default_factory=RepositoryInput)
    config_files: dict[str, str | None] = Field(
        default_factory=dict,
        description="Recognized file name to content; null marks the file as absent",
    )
    source_files: list[SourceFileInput] = Field(default_factory=list)
    file_paths: list[str] = Field(
        default_factory=list, description="Flat list of every path in the repository"
    )


class ManifestRequest(BaseModel):
    """Request body for a standalone package.json analysis."""

    content: str = Field(description="Raw package.json text")


# ─────────────────────────────────────────────────────────────
# Response Models
# ─────────────────────────────────────────────────────────────


class TechnologyResponse(BaseModel):
    """A detected technology."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    version: str | None = None
    category: str = Field(description="e.g., 'framework', 'language', 'database'")
    description: str | None = None
    confidence: float = Field(ge=0, le=1)


class DependencyResponse(BaseModel):
    """A declared manifest dependency."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    version: str = Field(description="Raw declared range, e.g., '^18.0.0'")
    is_dev: bool
    is_optional: bool
    description: str


class ProjectStructureResponse(BaseModel):
    """Resolved project structure."""

    model_config = ConfigDict(from_attributes=True)

    type: str = Field(description="web, mobile, desktop, cli, library or unknown")
    framework: str | None = None
    language: str
    build_tool: str | None = None
    package_manager: str | None = None
    has_tests: bool
    has_documentation: bool
    has_ci: bool
    has_linting: bool
    has_typescript: bool


class DetectedFileResponse(BaseModel):
    """A recognized file with its classification."""

    model_config = ConfigDict(from_attributes=True)

    path: str
    type: str = Field(description="package, config, source, test, documentation or ci")
    importance: float = Field(ge=0, le=1)


class RepositoryResponse(BaseModel):
    """Repository metadata echoed back to the caller."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    full_name: str
    description: str | None = None
    html_url: str | None = None
    language: str | None = None
    stars: int
    forks: int
    default_branch: str
    updated_at: str | None = None


class AnalysisResponse(BaseModel):
    """Full analysis result."""

    model_config = ConfigDict(from_attributes=True)

    repository: RepositoryResponse
    tech_stack: list[TechnologyResponse]
    dependencies: list[DependencyResponse]
    structure: ProjectStructureResponse
    detected_files: list[DetectedFileResponse]
    patterns: list[str]
    primary_language: str | None = None
    summary: str


class ManifestResponse(BaseModel):
    """Manifest analyzer output. Structure carries only the fields the manifest set."""

    tech_stack: list[TechnologyResponse]
    dependencies: list[DependencyResponse]
    structure: dict[str, str | bool]
