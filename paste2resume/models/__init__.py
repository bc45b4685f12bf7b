"""Data models for the application."""

from .resume import Certification, Education, Interest, ResumeRecord, WorkExperience

__all__ = [
    "Certification",
    "Education",
    "Interest",
    "ResumeRecord",
    "WorkExperience",
]
