"""Temporary upload storage.

Holds each uploaded file only for the request that carried it.
"""

from src.storage.temp_upload import UploadedArtifact, discard, temporary_upload

__all__ = ["UploadedArtifact", "discard", "temporary_upload"]
