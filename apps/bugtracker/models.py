from django.db import models
from django.db.models import Q

from .constants import (
    SEVERITY_HIGH,
    SEVERITY_LOW,
    SEVERITY_MEDIUM,
    TITLE_MAX_LENGTH,
)


class BugReport(models.Model):
    class Severity(models.TextChoices):
        LOW = SEVERITY_LOW, "Low"
        MEDIUM = SEVERITY_MEDIUM, "Medium"
        HIGH = SEVERITY_HIGH, "High"

    title = models.CharField(max_length=TITLE_MAX_LENGTH)
    description = models.TextField(blank=True, default="")
    severity = models.CharField(max_length=12, choices=Severity.choices, default=Severity.MEDIUM)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]
        constraints = [
            # I keep the storage invariants in the database too, not only in the serializer.
            models.CheckConstraint(
                condition=Q(severity__in=[SEVERITY_LOW, SEVERITY_MEDIUM, SEVERITY_HIGH]),
                name="bugreport_severity_valid",
            ),
            models.CheckConstraint(
                condition=~Q(title=""),
                name="bugreport_title_not_empty",
            ),
        ]

    def __str__(self):
        return f"[{self.get_severity_display()}] {self.title}"
