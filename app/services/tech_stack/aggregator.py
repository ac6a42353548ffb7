"""
Merging of detections from independent analyzers.

Detections sharing a (name, category) identity collapse into one entry.
Agreement between detectors raises confidence, capped below certainty.
"""

from collections.abc import Iterable

from app.services.tech_stack.constants import CORROBORATION_BONUS, MAX_MERGED_CONFIDENCE
from app.services.tech_stack.types import TechnologyDetection


def merged_confidence(confidences: list[float]) -> float:
    """
    Confidence of a corroborated detection.

    Mean plus the corroboration bonus, capped at MAX_MERGED_CONFIDENCE, and
    never below the strongest single contributor.
    """
    if len(confidences) == 1:
        return confidences[0]
    average = sum(confidences) / len(confidences)
    boosted = min(MAX_MERGED_CONFIDENCE, average + CORROBORATION_BONUS)
    return max(boosted, max(confidences))


def merge_detections(detections: Iterable[TechnologyDetection]) -> list[TechnologyDetection]:
    """
    Deduplicate detections and order them by confidence.

    Args:
        detections: Concatenated detections from all analyzers

    Returns:
        One detection per (name, category), sorted by confidence descending.
        Ties keep first-encountered order.
    """
    groups: dict[tuple[str, str], list[TechnologyDetection]] = {}
    for detection in detections:
        groups.setdefault(detection.identity, []).append(detection)

    merged: list[TechnologyDetection] = []
    for (name, category), members in groups.items():
        if len(members) == 1:
            merged.append(members[0])
            continue

        merged.append(
            TechnologyDetection(
                name=name,
                category=category,
                confidence=merged_confidence([m.confidence for m in members]),
                version=next((m.version for m in members if m.version), None),
                description=next((m.description for m in members if m.description), None),
            )
        )

    # sorted() is stable
    return sorted(merged, key=lambda d: d.confidence, reverse=True)
