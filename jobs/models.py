# jobs/models.py
from dataclasses import dataclass, field, fields as dataclass_fields
from datetime import datetime

from django.db import models
from django.utils import timezone


DEFAULT_JOB_TYPE = 'Full-time'

JOB_TYPE_CHOICES = (
    ('Full-time', 'Full-time'),
    ('Part-time', 'Part-time'),
    ('Contract', 'Contract'),
    ('Temporary', 'Temporary'),
)


class JobStatus(models.TextChoices):
    ACTIVE = 'active', 'Active'
    ARCHIVED = 'archived', 'Archived'


class ApplicationStatus(models.TextChoices):
    NEW = 'new', 'New'
    REVIEW = 'review', 'In review'
    SHORTLISTED = 'shortlisted', 'Shortlisted'
    REJECTED = 'rejected', 'Rejected'


@dataclass(frozen=True)
class JobFields:
    """
    The complete set of editable job fields. Create and edit both take one of
    these, so an edit always overwrites every field.
    """
    title: str
    company: str
    location: str
    type: str
    rate: str
    deadline: str
    description: str

    @classmethod
    def from_mapping(cls, data):
        """Build from a dict-like; missing keys become empty strings."""
        return cls(**{f.name: str(data.get(f.name) or '') for f in dataclass_fields(cls)})


@dataclass(frozen=True)
class Job:
    id: int
    title: str = ''
    company: str = ''
    location: str = ''
    type: str = DEFAULT_JOB_TYPE
    rate: str = ''
    deadline: str = ''
    description: str = ''
    status: str = JobStatus.ACTIVE

    def __str__(self):
        return f"{self.title} @ {self.company or '-'}"

    @property
    def is_active(self):
        return self.status == JobStatus.ACTIVE

    def search_text(self):
        return f"{self.title} {self.company} {self.location} {self.description}".lower()


@dataclass(frozen=True)
class ApplicantFields:
    name: str = ''
    email: str = ''
    phone: str = ''
    experience: str = ''
    cv: str = ''
    note: str = ''


@dataclass(frozen=True)
class Application:
    id: int
    job_id: int
    job_title: str = ''
    name: str = ''
    email: str = ''
    phone: str = ''
    experience: str = ''
    cv: str = ''
    note: str = ''
    cv_file_url: str = ''
    cv_original_name: str = ''
    created_at: datetime = field(default_factory=timezone.now)
    status: str = ApplicationStatus.NEW

    def __str__(self):
        return f"{self.name or 'Applicant'} -> {self.job_title} ({self.status})"
