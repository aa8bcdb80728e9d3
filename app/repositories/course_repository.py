"""
Persistence gateway for the cursos table.

CourseGateway is the narrow contract the service depends on; CourseRepository
implements it on top of a SQLAlchemy Session. Writes are insert-or-replace
keyed by code and commit immediately.
"""

from typing import List, Optional, Protocol, Sequence

from sqlalchemy.orm import Session

from app.models.course import Course


class CourseGateway(Protocol):
    def find_all(self) -> List[Course]: ...

    def find_by_key(self, code: str) -> Optional[Course]: ...

    def find_by_name_prefix(self, prefix: str) -> List[Course]: ...

    def find_by_price_range(self, min_price: int, max_price: int) -> List[Course]: ...

    def save(self, course: Course) -> Course: ...

    def save_all(self, courses: Sequence[Course]) -> List[Course]: ...

    def exists_by_key(self, code: str) -> bool: ...

    def delete_by_key(self, code: str) -> None: ...


class CourseRepository:
    """SQLAlchemy implementation of CourseGateway."""

    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> List[Course]:
        return self.db.query(Course).order_by(Course.code.asc()).all()

    def find_by_key(self, code: str) -> Optional[Course]:
        return self.db.get(Course, code)

    def find_by_name_prefix(self, prefix: str) -> List[Course]:
        # 直接組 LIKE 'prefix%'，不跳脫 % 和 _
        return (
            self.db.query(Course)
            .filter(Course.name.like(f"{prefix}%"))
            .order_by(Course.code.asc())
            .all()
        )

    def find_by_price_range(self, min_price: int, max_price: int) -> List[Course]:
        return (
            self.db.query(Course)
            .filter(Course.price >= min_price, Course.price <= max_price)
            .order_by(Course.code.asc())
            .all()
        )

    def save(self, course: Course) -> Course:
        """
        Insert or replace the row with the same code.

        merge() copies the given state onto the persistent instance, so a
        second save with an existing code overwrites every column.
        """
        saved = self.db.merge(course)
        self.db.commit()
        self.db.refresh(saved)
        return saved

    def save_all(self, courses: Sequence[Course]) -> List[Course]:
        saved = []
        for c in courses:
            # flush 後下一筆相同 code 的 merge 才找得到，後面的蓋掉前面的
            saved.append(self.db.merge(c))
            self.db.flush()
        self.db.commit()
        for c in saved:
            self.db.refresh(c)
        return saved

    def exists_by_key(self, code: str) -> bool:
        return self.db.query(Course.code).filter(Course.code == code).first() is not None

    def delete_by_key(self, code: str) -> None:
        self.db.query(Course).filter(Course.code == code).delete(synchronize_session=False)
        self.db.commit()
