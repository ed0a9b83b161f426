# =============================================================================
# ABSTRACT BASE MODELS
# =============================================================================
import uuid

from django.db import models


class UUIDModel(models.Model):
    """Abstract base model with an opaque UUID primary key."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    class Meta:
        abstract = True


class CreatedAtModel(UUIDModel):
    """Abstract base model for records that are never edited after creation."""
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        abstract = True
        ordering = ['-created_at']


class TimeStampedModel(CreatedAtModel):
    """Abstract base model with created_at and updated_at fields."""
    updated_at = models.DateTimeField(auto_now=True)

    class Meta(CreatedAtModel.Meta):
        abstract = True
