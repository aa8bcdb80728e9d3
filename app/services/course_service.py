"""
Course service.

Sits between the router and the persistence gateway: calls the gateway and
turns missing rows, empty filtered results and unparsable numbers into
CourseNotFoundError / InvalidCourseArgumentError.
"""

import logging
from typing import List, Sequence

from app.exceptions import CourseNotFoundError, InvalidCourseArgumentError
from app.models.course import INT_MAX, INT_MIN, Course
from app.repositories.course_repository import CourseGateway

logger = logging.getLogger("app.courses")


def parse_int(field: str, value) -> int:
    """Parse a 32-bit integer argument, raising InvalidCourseArgumentError otherwise."""
    if isinstance(value, bool):
        raise InvalidCourseArgumentError(field, value)
    if isinstance(value, int):
        number = value
    else:
        try:
            number = int(str(value).strip())
        except (TypeError, ValueError):
            raise InvalidCourseArgumentError(field, value)
    if not INT_MIN <= number <= INT_MAX:
        raise InvalidCourseArgumentError(field, value)
    return number


class CourseService:
    """Course use cases on top of a CourseGateway."""

    def __init__(self, gateway: CourseGateway):
        self.gateway = gateway

    # ===== 查詢 =====

    def list_all(self) -> List[Course]:
        return self.gateway.find_all()

    def get_by_code(self, code: str) -> Course:
        course = self.gateway.find_by_key(code)
        if course is None:
            logger.warning("Course %s not found", code)
            raise CourseNotFoundError(code)
        return course

    def list_by_name_prefix(self, prefix: str) -> List[Course]:
        """
        Courses whose name starts with prefix.

        An empty result is reported as CourseNotFoundError, not as an empty list.
        """
        courses = self.gateway.find_by_name_prefix(prefix)
        if not courses:
            logger.warning("No course name starts with %r", prefix)
            raise CourseNotFoundError()
        return courses

    def list_by_price_range(self, min_price, max_price) -> List[Course]:
        """
        Courses with min_price <= price <= max_price.

        Bounds may arrive as raw query strings; anything that is not an
        integer raises InvalidCourseArgumentError. min_price > max_price simply
        matches nothing and therefore raises CourseNotFoundError.
        """
        lo = parse_int("precioMinimo", min_price)
        hi = parse_int("precioMaximo", max_price)

        courses = self.gateway.find_by_price_range(lo, hi)
        if not courses:
            logger.warning("No course priced between %d and %d", lo, hi)
            raise CourseNotFoundError()
        return courses

    # ===== 新增 =====

    def create(self, course: Course) -> Course:
        # 不檢查代碼是否已存在，相同 code 會直接覆蓋
        saved = self.gateway.save(course)
        logger.info("Course %s saved", saved.code)
        return saved

    def create_many(self, courses: Sequence[Course]) -> List[Course]:
        saved = self.gateway.save_all(courses)
        if not saved:
            logger.warning("Bulk create produced no courses")
            raise CourseNotFoundError()
        logger.info("Saved %d courses", len(saved))
        return saved

    # ===== 修改 / 刪除 =====

    def update(self, course: Course) -> Course:
        if self.gateway.find_by_key(course.code) is None:
            logger.warning("Cannot update missing course %s", course.code)
            raise CourseNotFoundError(course.code)

        updated = self.gateway.save(course)
        logger.info("Course %s updated", updated.code)
        return updated

    def delete_by_code(self, code: str) -> None:
        # 先查再刪，兩步之間沒有鎖
        if not self.gateway.exists_by_key(code):
            logger.warning("Cannot delete missing course %s", code)
            raise CourseNotFoundError(code)

        self.gateway.delete_by_key(code)
        logger.info("Course %s deleted", code)
