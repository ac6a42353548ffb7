from app.api.v1 import analysis

__all__ = [
    "analysis",
]
