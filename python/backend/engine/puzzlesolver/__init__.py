from backend.engine.puzzlesolver.reporter import ProgressReporter
from backend.engine.puzzlesolver.solver import (
    BreadthFirstSearch,
    DepthFirstSearch,
    FrontierSearch,
    SearchStatus,
    SolveResult,
    Solver,
)

__all__ = [
    "BreadthFirstSearch",
    "DepthFirstSearch",
    "FrontierSearch",
    "ProgressReporter",
    "SearchStatus",
    "SolveResult",
    "Solver",
]
