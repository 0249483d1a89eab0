from backend.models.circle import Circle
from backend.models.color import PALETTE, RGB, Color
from backend.models.labels import Labels, get_labels
from backend.models.snapshot import Phase, Snapshot, TapOutcome

__all__ = [
    "Circle",
    "Color",
    "Labels",
    "PALETTE",
    "Phase",
    "RGB",
    "Snapshot",
    "TapOutcome",
    "get_labels",
]
