from backend.engine.searchstate.registry import VisitedRegistry
from backend.engine.searchstate.state import ProgressSnapshot, SearchStats

__all__ = ["ProgressSnapshot", "SearchStats", "VisitedRegistry"]
