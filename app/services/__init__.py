# Services package

from app.services.tech_stack import TechStackAnalyzer

__all__ = [
    "TechStackAnalyzer",
]
