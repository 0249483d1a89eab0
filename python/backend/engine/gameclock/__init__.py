from backend.engine.gameclock.scheduler import (
    Action,
    Handle,
    Scheduler,
    TickScheduler,
    TimerHandle,
)

__all__ = ["Action", "Handle", "Scheduler", "TickScheduler", "TimerHandle"]
