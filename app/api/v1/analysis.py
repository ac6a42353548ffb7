"""
Tech stack analysis endpoints.

Callers supply already-fetched repository files; nothing here touches the
network. Handlers are plain functions, so FastAPI runs them in its
threadpool and the CPU-bound scan does not block the event loop.
"""

import logging

from fastapi import APIRouter

from app.config import settings
from app.core.exceptions import PayloadTooLargeError
from app.schemas.analysis import (
    AnalysisRequest,
    AnalysisResponse,
    DependencyResponse,
    ManifestRequest,
    ManifestResponse,
    TechnologyResponse,
)
from app.services.tech_stack import SourceFile, TechStackAnalyzer, analyze_package_json

router = APIRouter(prefix="/analysis", tags=["analysis"])
logger = logging.getLogger(__name__)


def check_source_limits(source_files: list[SourceFile]) -> None:
    """Reject source sets larger than the configured scan limits."""
    if len(source_files) > settings.max_source_files:
        raise PayloadTooLargeError(
            f"Too many source files: {len(source_files)} (max {settings.max_source_files})"
        )

    total_bytes = sum(f.size for f in source_files)
    if total_bytes > settings.max_source_bytes:
        raise PayloadTooLargeError(
            f"Source files too large: {total_bytes} bytes (max {settings.max_source_bytes})"
        )


@router.post("", response_model=AnalysisResponse)
def analyze_repository(data: AnalysisRequest) -> AnalysisResponse:
    """
    Analyze a repository's tech stack.

    Returns the merged technology list, dependency records, project
    structure, recognized files, architecture patterns and a summary.
    """
    source_files = [f.to_source_file() for f in data.source_files]
    check_source_limits(source_files)

    analyzer = TechStackAnalyzer(content_scan_enabled=settings.content_scan_enabled)
    result = analyzer.analyze(
        repository=data.repository.to_info(),
        config_files=data.config_files,
        source_files=source_files,
        file_paths=data.file_paths,
    )
    return AnalysisResponse.model_validate(result)


@router.post("/manifest", response_model=ManifestResponse)
def analyze_manifest(data: ManifestRequest) -> ManifestResponse:
    """Analyze a single package.json. Malformed input yields an empty result."""
    analysis = analyze_package_json(data.content)
    return ManifestResponse(
        tech_stack=[TechnologyResponse.model_validate(t) for t in analysis.tech_stack],
        dependencies=[DependencyResponse.model_validate(d) for d in analysis.dependencies],
        structure=analysis.structure.as_dict(),
    )
