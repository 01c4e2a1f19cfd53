"""Base abstract models shared by the order service apps.

Provides:
- ``BaseModel``: storage-assigned integer PK + created_at / updated_at.
- ``SoftDeleteModel``: Extends BaseModel with soft-delete via ``is_active``.

Design decisions:
- Records are never physically removed.  ``delete()`` on an instance or a
  queryset only flips ``is_active`` to ``False``.
- ``objects`` manager returns ALL records (unfiltered).  Use ``.active()``
  explicitly to exclude soft-deleted rows.
- ``save()`` guard ensures ``updated_at`` is included when ``update_fields``
  is specified (Django skips ``auto_now`` fields otherwise).
"""

from __future__ import annotations

from django.db import models
from django.utils import timezone

# ---------------------------------------------------------------------------
# BaseModel
# ---------------------------------------------------------------------------


class BaseModel(models.Model):
    """Abstract base with timestamp bookkeeping.

    The primary key comes from the app's ``default_auto_field``
    (``BigAutoField``), so ids are integers assigned by the database.
    """

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True

    def save(self, *args, **kwargs) -> None:
        """Ensure ``updated_at`` is refreshed even when ``update_fields`` is passed."""
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "updated_at" not in update_fields:
            kwargs["update_fields"] = list(update_fields) + ["updated_at"]
        super().save(*args, **kwargs)


# ---------------------------------------------------------------------------
# Soft Delete infrastructure
# ---------------------------------------------------------------------------


class ActiveQuerySet(models.QuerySet):
    """QuerySet with soft-delete helpers."""

    def active(self) -> ActiveQuerySet:
        """Return only records that were not soft-deleted."""
        return self.filter(is_active=True)

    def inactive(self) -> ActiveQuerySet:
        """Return only soft-deleted records."""
        return self.filter(is_active=False)

    def delete(self) -> tuple[int, dict[str, int]]:
        """Bulk soft-delete: clears ``is_active`` and bumps ``updated_at``."""
        count = self.active().update(is_active=False, updated_at=timezone.now())
        return count, {self.model._meta.label: count}


class SoftDeleteManager(models.Manager):
    """Manager that exposes ``.active()`` / ``.inactive()`` on the queryset."""

    def get_queryset(self) -> ActiveQuerySet:
        return ActiveQuerySet(self.model, using=self._db)

    def active(self) -> ActiveQuerySet:
        return self.get_queryset().active()

    def inactive(self) -> ActiveQuerySet:
        return self.get_queryset().inactive()


class SoftDeleteModel(BaseModel):
    """Abstract model with soft-delete via a single ``is_active`` flag.

    - ``objects`` is **unfiltered** (returns all rows).
    - Use ``Model.objects.active()`` to exclude soft-deleted rows.
    - ``delete()`` performs a soft-delete; there is no physical erase.
    """

    is_active = models.BooleanField(default=True, db_index=True)

    objects = SoftDeleteManager()

    class Meta:
        abstract = True

    @property
    def is_deleted(self) -> bool:
        """Computed: ``True`` when the record has been soft-deleted."""
        return not self.is_active

    def delete(self, using=None, keep_parents=False) -> tuple[int, dict[str, int]]:
        """Soft-delete this instance (no-op if already inactive)."""
        if self.is_deleted:
            return 0, {}
        self.is_active = False
        self.save(update_fields=["is_active", "updated_at"])
        return 1, {self._meta.label: 1}
