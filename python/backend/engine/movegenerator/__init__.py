from backend.engine.movegenerator.generator import MoveGenerator

__all__ = ["MoveGenerator"]
