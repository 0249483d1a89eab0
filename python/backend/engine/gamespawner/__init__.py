from backend.engine.gamespawner.spawner import Spawner

__all__ = ["Spawner"]
