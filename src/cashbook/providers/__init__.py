"""Collaborator implementations shipped with the app."""

from cashbook.providers.local_auth import LocalAuthProvider
from cashbook.providers.notifier import LoggingNotifier, RecordingNotifier, Notice

__all__ = [
    "LocalAuthProvider",
    "LoggingNotifier",
    "RecordingNotifier",
    "Notice",
]
