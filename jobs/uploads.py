# jobs/uploads.py
"""
CV upload handling: type/size checks, unique on-disk names, and picking a
writable storage root once at startup.
"""
import logging
import os
import random
import re
import shutil
import tempfile
import time
from dataclasses import dataclass

from django.core.files.storage import FileSystemStorage

from .exceptions import InvalidFile

logger = logging.getLogger(__name__)

ALLOWED_CV_EXTENSIONS = ('.pdf', '.doc', '.docx', '.rtf', '.odt')
ALLOWED_CV_MIME_TYPES = (
    'application/pdf',
    'application/msword',
    'application/vnd.openxmlformats-officedocument.wordprocessingml.document',
    'application/rtf',
    'text/rtf',
    'application/vnd.oasis.opendocument.text',
)
DEFAULT_MAX_UPLOAD_SIZE = 5 * 1024 * 1024

_UNSAFE_CHARS = re.compile(r'[^a-zA-Z0-9._-]')


@dataclass(frozen=True)
class StoredFile:
    name: str
    url: str
    original_name: str


def safe_filename(original_name):
    return _UNSAFE_CHARS.sub('_', original_name or '')


def unique_storage_name(original_name):
    """<epoch millis>-<random>-<sanitized original name>"""
    millis = int(time.time() * 1000)
    suffix = random.randint(0, 10 ** 9)
    return f"{millis}-{suffix}-{safe_filename(original_name)}"


def resolve_upload_root(preferred_root):
    """
    Return the directory that should hold uploads/.

    The preferred root is probed by creating and removing a throwaway
    subdirectory; if that fails the system temp dir is used instead.
    """
    probe = os.path.join(preferred_root, 'uploads-test')
    try:
        os.makedirs(probe, exist_ok=True)
        shutil.rmtree(probe)
        return preferred_root
    except OSError as e:
        fallback = tempfile.gettempdir()
        logger.warning("Upload root %s is not writable (%s); falling back to %s", preferred_root, e, fallback)
        return fallback


def ensure_upload_dir(root):
    upload_dir = os.path.join(root, 'uploads')
    if not os.path.isdir(upload_dir):
        try:
            os.makedirs(upload_dir, exist_ok=True)
        except OSError:
            logger.exception("Failed to create upload directory %s", upload_dir)
    return upload_dir


class CvStorage:
    """
    Validates and stores one CV file per application.
    """

    def __init__(self, location, base_url='/uploads/', max_size=DEFAULT_MAX_UPLOAD_SIZE):
        self.location = location
        self.max_size = max_size
        self.storage = FileSystemStorage(location=location, base_url=base_url)

    def validate(self, uploaded_file):
        """Raise InvalidFile unless the file is a small enough document."""
        size = getattr(uploaded_file, 'size', None) or 0
        if size > self.max_size:
            raise InvalidFile(f"CV file must be {self.max_size // (1024 * 1024)} MB or smaller.")

        name = getattr(uploaded_file, 'name', '') or ''
        ext = os.path.splitext(name)[1].lower()
        content_type = getattr(uploaded_file, 'content_type', '') or ''
        if ext not in ALLOWED_CV_EXTENSIONS and content_type not in ALLOWED_CV_MIME_TYPES:
            raise InvalidFile("Unsupported CV file type. Upload a PDF, DOC, DOCX, RTF or ODT file.")

    def accept(self, uploaded_file):
        """Validate, persist under a unique name and return a StoredFile."""
        try:
            self.validate(uploaded_file)
        except InvalidFile as e:
            logger.info("Rejected CV upload %r: %s", getattr(uploaded_file, 'name', ''), e)
            raise
        original_name = getattr(uploaded_file, 'name', '') or ''
        stored_name = self.storage.save(unique_storage_name(original_name), uploaded_file)
        logger.info("Stored CV upload %s (%s bytes)", stored_name, getattr(uploaded_file, 'size', 0))
        return StoredFile(name=stored_name, url=self.storage.url(stored_name), original_name=original_name)

    def path(self, name):
        return self.storage.path(name)
