# jobs/services.py
"""
Job catalog and application review operations over a BaseStore.

Views never touch the store directly; they call these services, which own
every mutation and every status check.
"""
import logging

from django.utils import timezone

from .exceptions import ApplicationNotFound, InvalidArgument, JobNotFound
from .models import DEFAULT_JOB_TYPE, ApplicantFields, ApplicationStatus, JobStatus

logger = logging.getLogger(__name__)

ALL_STATUSES = 'all'


def _clean(value):
    return (value or '').strip()


def parse_id(raw):
    """Return an int id from a path/query value, or None if it is not numeric."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    try:
        return int(str(raw).strip())
    except (TypeError, ValueError):
        return None


def _job_values(fields):
    return {
        'title': fields.title or '',
        'company': fields.company or '',
        'location': fields.location or '',
        'type': fields.type or DEFAULT_JOB_TYPE,
        'rate': fields.rate or '',
        'deadline': fields.deadline or '',
        'description': fields.description or '',
    }


class JobCatalog:

    def __init__(self, store):
        self.store = store

    def list_jobs(self, status):
        if status not in JobStatus.values:
            raise InvalidArgument(f"Unknown job status: {status!r}")
        return [job for job in self.store.all_jobs() if job.status == status]

    def list_active_jobs(self, q=None, location=None, type=None):
        """
        Active jobs matching every given filter (case-insensitive).
          - q: substring of title + company + location + description
          - location: substring of location
          - type: exact match on type
        """
        q = _clean(q).lower()
        location = _clean(location).lower()
        job_type = _clean(type).lower()

        jobs = self.list_jobs(JobStatus.ACTIVE)
        if q:
            jobs = [job for job in jobs if q in job.search_text()]
        if location:
            jobs = [job for job in jobs if location in (job.location or '').lower()]
        if job_type:
            jobs = [job for job in jobs if (job.type or '').lower() == job_type]
        return jobs

    def get_job(self, job_id):
        job = self.store.get_job(parse_id(job_id))
        if job is None:
            raise JobNotFound(job_id)
        return job

    def find_job(self, job_id):
        """Like get_job but returns None instead of raising."""
        job_id = parse_id(job_id)
        return self.store.get_job(job_id) if job_id is not None else None

    def create_job(self, fields):
        job = self.store.add_job(status=JobStatus.ACTIVE, **_job_values(fields))
        logger.info("Job %s created: %s", job.id, job.title)
        return job

    def update_job(self, job_id, fields):
        job = self.store.replace_job(parse_id(job_id), **_job_values(fields))
        if job is None:
            raise JobNotFound(job_id)
        logger.info("Job %s updated", job.id)
        return job

    def set_job_status(self, job_id, status):
        if status not in JobStatus.values:
            raise InvalidArgument(f"Unknown job status: {status!r}")
        job = self.store.replace_job(parse_id(job_id), status=JobStatus(status))
        if job is None:
            raise JobNotFound(job_id)
        logger.info("Job %s is now %s", job.id, job.status)
        return job

    def archive_job(self, job_id):
        return self.set_job_status(job_id, JobStatus.ARCHIVED)

    def activate_job(self, job_id):
        return self.set_job_status(job_id, JobStatus.ACTIVE)

    def delete_job(self, job_id):
        if self.store.remove_job(parse_id(job_id)):
            logger.info("Job %s deleted", job_id)

    def counts(self):
        jobs = self.store.all_jobs()
        active = sum(1 for job in jobs if job.status == JobStatus.ACTIVE)
        return {'total': len(jobs), 'active': active, 'archived': len(jobs) - active}


class ApplicationDesk:
    """Intake of public applications and the admin review workflow."""

    def __init__(self, store, cv_storage):
        self.store = store
        self.cv_storage = cv_storage

    def submit_application(self, job_id, fields=None, cv_file=None):
        fields = fields or ApplicantFields()
        job = self.store.get_job(parse_id(job_id))
        if job is None:
            raise JobNotFound(job_id)

        cv_file_url = cv_original_name = ''
        if cv_file:
            # raises InvalidFile before anything is recorded
            stored = self.cv_storage.accept(cv_file)
            cv_file_url, cv_original_name = stored.url, stored.original_name

        application = self.store.add_application(
            job_id=job.id,
            job_title=job.title or '',
            name=fields.name or '',
            email=fields.email or '',
            phone=fields.phone or '',
            experience=fields.experience or '',
            cv=fields.cv or '',
            note=fields.note or '',
            cv_file_url=cv_file_url,
            cv_original_name=cv_original_name,
            created_at=timezone.now(),
            status=ApplicationStatus.NEW,
        )
        logger.info("Application %s received for job %s", application.id, job.id)
        return application

    def list_applications(self, status=None, job_id=None):
        status = _clean(status)
        if status and status != ALL_STATUSES and status not in ApplicationStatus.values:
            raise InvalidArgument(f"Unknown application status: {status!r}")
        job_id = parse_id(job_id) if job_id not in (None, '') else None

        applications = self.store.all_applications()
        if status and status != ALL_STATUSES:
            applications = [a for a in applications if a.status == status]
        if job_id is not None:
            applications = [a for a in applications if a.job_id == job_id]
        return applications

    def get_application(self, application_id):
        application = self.store.get_application(parse_id(application_id))
        if application is None:
            raise ApplicationNotFound(application_id)
        return application

    def set_application_status(self, application_id, status):
        """
        Move an application to a new status. An empty status leaves it as is;
        anything outside ApplicationStatus raises InvalidArgument.
        """
        application = self.get_application(application_id)
        status = _clean(status)
        if not status:
            return application
        if status not in ApplicationStatus.values:
            raise InvalidArgument(f"Unknown application status: {status!r}")
        application = self.store.replace_application(application.id, status=ApplicationStatus(status))
        if application is None:
            raise ApplicationNotFound(application_id)
        logger.info("Application %s moved to %s", application.id, application.status)
        return application

    def status_counts(self):
        applications = self.store.all_applications()
        counts = {
            status.value: sum(1 for a in applications if a.status == status)
            for status in ApplicationStatus
        }
        counts['total'] = len(applications)
        return counts

    def count_for_job(self, job_id):
        return sum(1 for a in self.store.all_applications() if a.job_id == job_id)
