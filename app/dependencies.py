from fastapi import Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.repositories.course_repository import CourseRepository
from app.services.course_service import CourseService


def get_course_repository(db: Session = Depends(get_db)) -> CourseRepository:
    return CourseRepository(db)


def get_course_service(repo: CourseRepository = Depends(get_course_repository)) -> CourseService:
    return CourseService(repo)
