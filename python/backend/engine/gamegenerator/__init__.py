from backend.engine.gamegenerator.generator import CircleGenerator

__all__ = ["CircleGenerator"]
