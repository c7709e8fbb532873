# jobs/seed.py
import json
import logging
import os

from django.core.exceptions import ImproperlyConfigured

from .models import JobFields

logger = logging.getLogger(__name__)


def load_jobs(catalog, path):
    """
    Create one active job per entry of a JSON file.

    Expected format: a JSON array of objects like:
    [{"title": "...", "company": "...", "location": "...", "type": "Full-time",
      "rate": "...", "deadline": "2026-03-15", "description": "..."}, ...]

    Entries without a title are skipped. Returns the created jobs.
    """
    if not os.path.exists(path):
        raise ImproperlyConfigured(f"Demo jobs file not found: {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        raise ImproperlyConfigured(f"Failed to load demo jobs JSON: {exc}")

    if not isinstance(data, list):
        raise ImproperlyConfigured("Demo jobs JSON root must be a list of job objects.")

    created = []
    for idx, item in enumerate(data, start=1):
        if not isinstance(item, dict) or not str(item.get('title') or '').strip():
            logger.warning("[%s] Skipping demo job: missing title.", idx)
            continue
        created.append(catalog.create_job(JobFields.from_mapping(item)))

    logger.info("Loaded %s demo jobs from %s", len(created), path)
    return created
