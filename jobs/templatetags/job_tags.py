# jobs/templatetags/job_tags.py
from django import template

from jobs.models import ApplicationStatus, JobStatus

register = template.Library()

APPLICATION_BADGES = {
    ApplicationStatus.NEW: 'status-badge status-new',
    ApplicationStatus.REVIEW: 'status-badge status-review',
    ApplicationStatus.SHORTLISTED: 'status-badge status-shortlisted',
    ApplicationStatus.REJECTED: 'status-badge status-rejected',
}

JOB_BADGES = {
    JobStatus.ACTIVE: 'badge badge-active',
    JobStatus.ARCHIVED: 'badge badge-archived',
}


@register.filter
def status_badge(status):
    """CSS classes for an application status."""
    return APPLICATION_BADGES[ApplicationStatus(status)]


@register.filter
def status_label(status):
    return ApplicationStatus(status).label


@register.filter
def job_badge(status):
    return JOB_BADGES[JobStatus(status)]


@register.filter
def job_status_label(status):
    return JobStatus(status).label


@register.simple_tag
def display_title(app, job=None):
    """Snapshot title, then the live job title, then a placeholder."""
    return app.job_title or (job.title if job else '') or 'Role'


@register.filter
def web_link(value):
    """The value if it is an http(s) URL, else an empty string."""
    value = (value or '').strip()
    return value if value.lower().startswith(('http://', 'https://')) else ''
