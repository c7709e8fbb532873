# jobs/store.py
"""
Storage for jobs and applications.

Records are immutable dataclasses; every mutation swaps whole records under a
lock, so a reader sees either the old or the new record, never a mix.
"""
import abc
import dataclasses
import itertools
import threading

from .models import Application, Job


class BaseStore(abc.ABC):
    """Repository interface the services talk to."""

    @abc.abstractmethod
    def add_job(self, **values):
        """Assign the next job id and store the job. Returns the new Job."""

    @abc.abstractmethod
    def get_job(self, job_id):
        """Return the Job or None."""

    @abc.abstractmethod
    def all_jobs(self):
        """Return all jobs in insertion order."""

    @abc.abstractmethod
    def replace_job(self, job_id, **changes):
        """Replace fields on a job. Returns the new Job or None if absent."""

    @abc.abstractmethod
    def remove_job(self, job_id):
        """Remove a job. Returns True if something was removed."""

    @abc.abstractmethod
    def add_application(self, **values):
        """Assign the next application id and store it. Returns the Application."""

    @abc.abstractmethod
    def get_application(self, application_id):
        """Return the Application or None."""

    @abc.abstractmethod
    def all_applications(self):
        """Return all applications in insertion order."""

    @abc.abstractmethod
    def replace_application(self, application_id, **changes):
        """Replace fields on an application. Returns it, or None if absent."""


class MemoryStore(BaseStore):
    """Process-lifetime store. Ids start at 1 and are never reused."""

    def __init__(self):
        self._jobs = {}
        self._applications = {}
        self._job_ids = itertools.count(1)
        self._application_ids = itertools.count(1)
        self._lock = threading.Lock()

    # jobs

    def add_job(self, **values):
        with self._lock:
            job = Job(id=next(self._job_ids), **values)
            self._jobs[job.id] = job
        return job

    def get_job(self, job_id):
        return self._jobs.get(job_id)

    def all_jobs(self):
        with self._lock:
            return list(self._jobs.values())

    def replace_job(self, job_id, **changes):
        with self._lock:
            job = self._jobs.get(job_id)
            if job is None:
                return None
            job = dataclasses.replace(job, **changes)
            self._jobs[job_id] = job
        return job

    def remove_job(self, job_id):
        with self._lock:
            return self._jobs.pop(job_id, None) is not None

    # applications

    def add_application(self, **values):
        with self._lock:
            application = Application(id=next(self._application_ids), **values)
            self._applications[application.id] = application
        return application

    def get_application(self, application_id):
        return self._applications.get(application_id)

    def all_applications(self):
        with self._lock:
            return list(self._applications.values())

    def replace_application(self, application_id, **changes):
        with self._lock:
            application = self._applications.get(application_id)
            if application is None:
                return None
            application = dataclasses.replace(application, **changes)
            self._applications[application_id] = application
        return application
