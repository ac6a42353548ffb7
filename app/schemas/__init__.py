"""Pydantic schemas for API request/response validation."""

from app.schemas.analysis import (
    AnalysisRequest,
    AnalysisResponse,
    DependencyResponse,
    DetectedFileResponse,
    ManifestRequest,
    ManifestResponse,
    ProjectStructureResponse,
    RepositoryInput,
    RepositoryResponse,
    SourceFileInput,
    TechnologyResponse,
)

__all__ = [
    "AnalysisRequest",
    "AnalysisResponse",
    "DependencyResponse",
    "DetectedFileResponse",
    "ManifestRequest",
    "ManifestResponse",
    "ProjectStructureResponse",
    "RepositoryInput",
    "RepositoryResponse",
    "SourceFileInput",
    "TechnologyResponse",
]
