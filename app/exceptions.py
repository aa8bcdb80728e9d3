"""
Course domain errors.

The service layer raises these; app.main maps them to HTTP responses with
fixed messages so no internal detail leaks to the client.
"""

from typing import Optional


COURSE_NOT_FOUND = "Course with the given arguments not found"
INVALID_ARGUMENT = "Invalid argument format"


class CourseError(Exception):
    """Base class for course-related errors."""

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code
        super().__init__(self.message)


class CourseNotFoundError(CourseError):
    """No row matches the key, or a filtered query came back empty."""

    def __init__(self, code: Optional[str] = None):
        super().__init__(COURSE_NOT_FOUND, code)


class InvalidCourseArgumentError(CourseError):
    """Raised when a numeric argument cannot be parsed."""

    def __init__(self, field: str, value=None):
        self.field = field
        self.value = value
        super().__init__(INVALID_ARGUMENT)
