"""
TechStackAnalyzer - runs the full detection pipeline over one repository.

Manifest, config and source analyzers run independently; their detections
are merged by the aggregator and their structure hints folded by the
synthesizer. The result is built once and never mutated.
"""

import logging
from collections.abc import Mapping, Sequence

from app.services.tech_stack.aggregator import merge_detections
from app.services.tech_stack.config_files import analyze_config_files
from app.services.tech_stack.constants import MANIFEST_FILE
from app.services.tech_stack.file_classifier import detect_files
from app.services.tech_stack.manifest import analyze_package_json
from app.services.tech_stack.source_scanner import (
    detect_languages,
    infer_primary_language,
    scan_config_content,
    scan_source_content,
)
from app.services.tech_stack.structure import (
    detect_patterns,
    scan_file_paths,
    synthesize_structure,
)
from app.services.tech_stack.summary import compose_summary
from app.services.tech_stack.types import (
    AnalysisResult,
    ManifestAnalysis,
    RepositoryInfo,
    SourceFile,
    StructureHints,
    TechnologyDetection,
)

logger = logging.getLogger(__name__)


class TechStackAnalyzer:
    """
    Detects the technology stack of a repository from already-fetched files.

    Holds no per-analysis state, so one instance can serve concurrent
    requests.
    """

    def __init__(self, content_scan_enabled: bool = True) -> None:
        self.content_scan_enabled = content_scan_enabled

    def analyze(
        self,
        repository: RepositoryInfo | None = None,
        config_files: Mapping[str, str | None] | None = None,
        source_files: Sequence[SourceFile] = (),
        file_paths: Sequence[str] = (),
    ) -> AnalysisResult:
        """
        Analyze one repository.

        Args:
            repository: Caller-supplied metadata, passed through unchanged
            config_files: Recognized file name to content, None meaning absent
            source_files: Source file records for content scanning
            file_paths: Flat list of every path in the repository

        Returns:
            AnalysisResult
        """
        repository = repository or RepositoryInfo()
        config_files = config_files or {}

        manifest_content = config_files.get(MANIFEST_FILE)
        manifest_present = manifest_content is not None
        manifest = analyze_package_json(manifest_content) if manifest_present else ManifestAnalysis()

        config = analyze_config_files(config_files)

        detections: list[TechnologyDetection] = [*manifest.tech_stack, *config.tech_stack]
        content_hints = StructureHints()
        primary_language = infer_primary_language(source_files)

        if self.content_scan_enabled:
            known = {tech.name for tech in detections}
            config_content = scan_config_content(config_files, known)
            detections.extend(config_content.tech_stack)
            content_hints = config_content.structure

            known.update(tech.name for tech in config_content.tech_stack)
            detections.extend(scan_source_content(source_files, known))

        detections.extend(detect_languages(source_files))

        # Extension-inferred language only fills the gap left by declared signals
        if not (manifest.structure.language or config.structure.language):
            content_hints.language = primary_language

        tech_stack = merge_detections(detections)
        structure = synthesize_structure(
            [manifest.structure, config.structure, content_hints, scan_file_paths(file_paths)],
            manifest_present=manifest_present,
        )
        patterns = detect_patterns(file_paths, tech_stack)
        summary = compose_summary(tech_stack, structure)

        logger.info(
            f"Analyzed {repository.full_name or repository.name or 'repository'}: "
            f"{len(tech_stack)} technologies, type={structure.type}, language={structure.language}"
        )

        return AnalysisResult(
            repository=repository,
            tech_stack=tuple(tech_stack),
            dependencies=tuple(manifest.dependencies),
            structure=structure,
            detected_files=tuple(detect_files(config_files)),
            patterns=tuple(patterns),
            primary_language=primary_language,
            summary=summary,
        )
