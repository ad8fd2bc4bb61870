"""
Error taxonomy for the Task Service.
Each error maps to one HTTP status code in task_server.
"""


class PlannerServiceError(Exception):
    """Base class for errors surfaced to API clients"""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(PlannerServiceError):
    """A required field is missing or empty"""

    status_code = 400


class NotFoundError(PlannerServiceError):
    """The operation targets a task id that does not exist"""

    status_code = 404


class StoreError(PlannerServiceError):
    """The database could not be reached or the statement failed"""

    status_code = 500
