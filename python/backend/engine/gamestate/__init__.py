from backend.engine.gamestate.state import RoundState

__all__ = ["RoundState"]
