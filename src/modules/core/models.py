"""Base abstract model for persisted entities.

Provides ``BaseModel``: ``created_at`` / ``updated_at`` timestamp bookkeeping
on top of the integer primary key Django assigns on first insert.

The timestamps are stamped inside ``save()`` rather than via ``auto_now_add``
/ ``auto_now``: both columns must receive the *same* instant on first persist,
and the two ``auto_*`` options each call ``timezone.now()`` separately.
"""

from __future__ import annotations

from django.db import models
from django.utils import timezone


class BaseModel(models.Model):
    """Abstract base with creation / modification timestamps.

    - On insert: ``created_at`` and ``updated_at`` receive one shared instant.
    - On every later save: only ``updated_at`` is refreshed.
    """

    created_at = models.DateTimeField(editable=False)
    updated_at = models.DateTimeField(editable=False)

    class Meta:
        abstract = True

    def save(self, *args, **kwargs) -> None:
        now = timezone.now()
        if self._state.adding:
            self.created_at = now
        self.updated_at = now

        # Django skips columns missing from update_fields.
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "updated_at" not in update_fields:
            kwargs["update_fields"] = list(update_fields) + ["updated_at"]
        super().save(*args, **kwargs)
