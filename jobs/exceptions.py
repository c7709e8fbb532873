# jobs/exceptions.py


class JobBoardError(Exception):
    """Base class for errors raised by the job board services."""


class NotFound(JobBoardError):
    message = "Not found"

    def __init__(self, object_id=None):
        self.object_id = object_id
        super().__init__(self.message)


class JobNotFound(NotFound):
    message = "Job not found"


class ApplicationNotFound(NotFound):
    message = "Application not found"


class InvalidArgument(JobBoardError):
    pass


class InvalidFile(JobBoardError):
    pass


class InvalidCredential(JobBoardError):
    pass
