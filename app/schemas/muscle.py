"""
Muscle vocabulary shared by the schemas and the engine.

The enum *members* are closed; which categories map to which members is
data and lives in :mod:`app.heatmap.taxonomy`.
"""

from enum import Enum


class MuscleGroup(str, Enum):
    """Fine-grained anatomical region used for load attribution."""
    CHEST = "chest"
    LATS = "lats"
    TRAPS = "traps"
    BACK_LOWER = "back_lower"
    SHOULDERS_FRONT = "shoulders_front"
    SHOULDERS_BACK = "shoulders_back"
    QUADS = "quads"
    GLUTES = "glutes"
    HAMSTRINGS = "hamstrings"
    CALVES = "calves"
    BICEPS = "biceps"
    TRICEPS = "triceps"
    ABS = "abs"


class ChartGroup(str, Enum):
    """Coarse display category for pills, badges and charts."""
    CHEST = "Chest"
    BACK = "Back"
    SHOULDERS = "Shoulders"
    LEGS = "Legs"
    ARMS = "Arms"
    CORE = "Core"


class ActivityType(str, Enum):
    """Kind of workout a log records.  Absent means ``resistance``."""
    RESISTANCE = "resistance"
    CALISTHENICS = "calisthenics"
    RUN = "run"
    WALK = "walk"
    CYCLE = "cycle"
    HIIT = "hiit"
