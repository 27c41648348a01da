"""
Model mixins for common functionality
"""

import uuid
from django.db import models


class UUIDModelMixin(models.Model):
    """
    Mixin to add UUID primary key
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    class Meta:
        abstract = True


class TimestampedModelMixin(models.Model):
    """
    Mixin to add created_at and updated_at timestamps
    """
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
