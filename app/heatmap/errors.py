"""
Error taxonomy for the engagement engine.

Two families of failure exist and they are handled differently:

* **Taxonomy integrity faults** (:class:`UnknownCategory`,
  :class:`EmptyMuscleGroupMapping`) mean the exercise catalog and the
  taxonomy tables are out of sync.  They always propagate to the caller;
  a silent zero would show up as "you did nothing" on the heatmap.
* **Missing exercises** (:class:`ExerciseNotFound`) are recoverable.  The
  caller picks the policy (skip the entry or abort the computation).

Malformed set metrics are *not* errors — see :mod:`app.heatmap.volume`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from app.schemas.workout import WorkoutLogEntry


class HeatmapError(Exception):
    """Base class for every error raised by the engagement engine."""


# ======================================================================
# Taxonomy integrity
# ======================================================================


class TaxonomyIntegrityError(HeatmapError):
    """The taxonomy tables cannot resolve a category found in the catalog."""

    def __init__(self, category: str, message: str):
        super().__init__(message)
        self.category = category


class UnknownCategory(TaxonomyIntegrityError):
    """A category has no entry in the category → muscle-group table."""

    def __init__(self, category: str, known: Optional[list[str]] = None):
        message = f"Unknown exercise category: '{category}'."
        if known:
            message += f"  Known categories: {known}"
        super().__init__(category, message)


class EmptyMuscleGroupMapping(TaxonomyIntegrityError):
    """A category is mapped to an empty muscle-group sequence."""

    def __init__(self, category: str):
        super().__init__(
            category,
            f"Category '{category}' maps to no muscle groups.",
        )


# ======================================================================
# Catalog lookup
# ======================================================================


class ExerciseNotFound(HeatmapError, LookupError):
    """A log entry references an exercise absent from the catalog.

    ``log_id``, ``log_date`` and ``entry_index`` are filled in when the
    error is raised from inside an aggregation so the offending entry can
    be located in the caller's data.
    """

    def __init__(
        self,
        entry: WorkoutLogEntry,
        log_id: Optional[str] = None,
        log_date: Any = None,
        entry_index: Optional[int] = None,
    ):
        self.entry = entry
        self.log_id = log_id
        self.log_date = log_date
        self.entry_index = entry_index
        super().__init__(self._describe())

    def _describe(self) -> str:
        message = (
            f"Exercise not found in catalog: id={self.entry.exercise_id!r}, "
            f"name={self.entry.exercise_name!r}"
        )
        location = []
        if self.log_id is not None:
            location.append(f"log={self.log_id!r}")
        if self.log_date is not None:
            location.append(f"date={self.log_date}")
        if self.entry_index is not None:
            location.append(f"entry={self.entry_index}")
        if location:
            message += f" ({', '.join(location)})"
        return message

    def located(
        self,
        log_id: Optional[str],
        log_date: Any,
        entry_index: int,
    ) -> ExerciseNotFound:
        """Return a copy of this error annotated with its log position."""
        return ExerciseNotFound(
            self.entry,
            log_id=log_id,
            log_date=log_date,
            entry_index=entry_index,
        )
