from backend.models.board import Board, Direction, Move
from backend.models.errors import ConfigurationError, InvariantViolation
from backend.models.piece import Piece
from backend.models.puzzlefile import PuzzleFile, PuzzleSpec
from backend.models.settings import Algorithm, RunSettings, Verbosity

__all__ = [
    "Algorithm",
    "Board",
    "ConfigurationError",
    "Direction",
    "InvariantViolation",
    "Move",
    "Piece",
    "PuzzleFile",
    "PuzzleSpec",
    "RunSettings",
    "Verbosity",
]
