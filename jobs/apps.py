# jobs/apps.py
import logging

from django.apps import AppConfig, apps
from django.conf import settings

logger = logging.getLogger(__name__)


class JobsConfig(AppConfig):
    name = 'jobs'
    verbose_name = 'Job board'

    store = None
    catalog = None
    desk = None
    cv_storage = None

    def ready(self):
        from .uploads import ensure_upload_dir, resolve_upload_root

        root = resolve_upload_root(settings.FIRSTCONNECT_UPLOAD_ROOT)
        self.install(upload_dir=ensure_upload_dir(root))

        if settings.FIRSTCONNECT_SEED_DEMO_JOBS:
            from .seed import load_jobs
            load_jobs(self.catalog, settings.FIRSTCONNECT_DEMO_JOBS_FILE)

    def install(self, store=None, upload_dir=None):
        """
        Build the services around a store. Called once from ready(); tests
        call it again to start from an empty store and a scratch upload dir.
        """
        from .services import ApplicationDesk, JobCatalog
        from .store import MemoryStore
        from .uploads import CvStorage

        self.store = store if store is not None else MemoryStore()
        if upload_dir is not None or self.cv_storage is None:
            self.cv_storage = CvStorage(
                upload_dir,
                base_url=settings.FIRSTCONNECT_UPLOADS_URL,
                max_size=settings.FIRSTCONNECT_CV_MAX_UPLOAD_SIZE,
            )
        self.catalog = JobCatalog(self.store)
        self.desk = ApplicationDesk(self.store, self.cv_storage)
        logger.info("Job board ready (uploads in %s)", self.cv_storage.location)
        return self


def get_services():
    """Return (catalog, desk) for the running process."""
    config = apps.get_app_config('jobs')
    return config.catalog, config.desk
