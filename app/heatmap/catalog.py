"""
Exercise catalog lookup.

Resolves the exercise referenced by a :class:`WorkoutLogEntry` to its
:class:`ExerciseDefinition` (and therefore its category).

Resolution order:

1. exact match on ``exercise_id``;
2. exact, case-sensitive match on ``exercise_name`` (names are stored
   canonically when the exercise is created).

A reference that matches neither raises :class:`ExerciseNotFound`.  What
happens next is the caller's decision, expressed as
:class:`OnMissingExercise`.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional, Union

from app.heatmap.errors import ExerciseNotFound
from app.schemas.workout import ExerciseDefinition, WorkoutLogEntry


class OnMissingExercise(str, Enum):
    """Policy applied when a log entry's exercise is not in the catalog."""
    SKIP = "skip"
    ABORT = "abort"


class ExerciseCatalog:
    """Read-only index over a list of exercise definitions.

    Built once per computation so that lookups inside aggregation loops
    are constant time.  When several definitions share an id or a name
    the first one wins.
    """

    def __init__(self, definitions: Iterable[ExerciseDefinition]):
        self._definitions: list[ExerciseDefinition] = list(definitions)
        self._by_id: dict[str, ExerciseDefinition] = {}
        self._by_name: dict[str, ExerciseDefinition] = {}
        for definition in self._definitions:
            self._by_id.setdefault(definition.id, definition)
            self._by_name.setdefault(definition.name, definition)

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self):
        return iter(self._definitions)

    def by_id(self, exercise_id: str) -> Optional[ExerciseDefinition]:
        return self._by_id.get(exercise_id)

    def by_name(self, name: str) -> Optional[ExerciseDefinition]:
        return self._by_name.get(name)

    def find(self, entry: WorkoutLogEntry) -> Optional[ExerciseDefinition]:
        """Definition for *entry* (id first, then name), or ``None``."""
        if entry.exercise_id:
            definition = self._by_id.get(entry.exercise_id)
            if definition is not None:
                return definition
        if entry.exercise_name:
            return self._by_name.get(entry.exercise_name)
        return None

    def categories(self) -> set[str]:
        return {d.category for d in self._definitions}


CatalogLike = Union[ExerciseCatalog, Iterable[ExerciseDefinition]]


def as_catalog(catalog: CatalogLike) -> ExerciseCatalog:
    """Wrap a plain definition list; pass an existing index through."""
    if isinstance(catalog, ExerciseCatalog):
        return catalog
    return ExerciseCatalog(catalog)


def resolve_exercise(entry: WorkoutLogEntry, catalog: CatalogLike) -> ExerciseDefinition:
    """Return the catalog definition *entry* refers to.

    Raises:
        ExerciseNotFound: Neither the id nor the name matches.
    """
    definition = as_catalog(catalog).find(entry)
    if definition is None:
        raise ExerciseNotFound(entry)
    return definition


def resolve_category(entry: WorkoutLogEntry, catalog: CatalogLike) -> str:
    """Return the category of the exercise *entry* refers to.

    Raises:
        ExerciseNotFound: Neither the id nor the name matches.
    """
    return resolve_exercise(entry, catalog).category
