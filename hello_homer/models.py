"""
Database models for the hello_homer app.

Version: 1.0
"""
from django.db import models


class Option(models.Model):
    """
    A named site option stored as a string.

    Hello Homer keeps its three display settings here; see ``options.py`` for
    the names and the typed view over them.
    """

    name = models.CharField(max_length=191, unique=True)
    value = models.TextField(blank=True, default="")
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name
