from backend.engine.gameplay.game import BoundsProvider, ColorRush, Listener

__all__ = ["BoundsProvider", "ColorRush", "Listener"]
