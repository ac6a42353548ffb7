"""
Tech stack detection package.

Turns raw repository file data into a confidence-scored technology list,
dependency records, a project structure descriptor and a summary.

Module structure:
- analyzer.py: TechStackAnalyzer pipeline
- constants.py: Signature catalog and confidence levels
- manifest.py: package.json analysis
- config_files.py: Auxiliary config file presence checks
- source_scanner.py: Extension and content scanning
- aggregator.py: Detection deduplication and merging
- structure.py: Structure synthesis and pattern detection
- summary.py: Summary sentence
- file_classifier.py: Detected file classification
"""

from app.services.tech_stack.aggregator import merge_detections
from app.services.tech_stack.analyzer import TechStackAnalyzer
from app.services.tech_stack.config_files import analyze_config_files
from app.services.tech_stack.file_classifier import classify_file, detect_files, file_importance
from app.services.tech_stack.manifest import analyze_package_json, get_package_description
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
    ConfigAnalysis,
    DependencyRecord,
    DetectedFile,
    ManifestAnalysis,
    ProjectStructure,
    RepositoryInfo,
    SourceFile,
    StructureHints,
    TechnologyDetection,
)

__all__ = [
    # Main class
    "TechStackAnalyzer",
    # Analyzers
    "analyze_package_json",
    "get_package_description",
    "analyze_config_files",
    "infer_primary_language",
    "detect_languages",
    "scan_source_content",
    "scan_config_content",
    "merge_detections",
    "scan_file_paths",
    "synthesize_structure",
    "detect_patterns",
    "compose_summary",
    "classify_file",
    "file_importance",
    "detect_files",
    # Types
    "AnalysisResult",
    "ConfigAnalysis",
    "DependencyRecord",
    "DetectedFile",
    "ManifestAnalysis",
    "ProjectStructure",
    "RepositoryInfo",
    "SourceFile",
    "StructureHints",
    "TechnologyDetection",
]
