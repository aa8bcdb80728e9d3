# app/routers/cursos.py
from typing import List

from fastapi import APIRouter, Depends, Query, Response, status

from app.dependencies import get_course_service
from app.models.course import Course
from app.schemas.course import CourseIn, CourseOut
from app.services.course_service import CourseService


router = APIRouter(tags=["Cursos"])


def to_model(body: CourseIn) -> Course:
    return Course(**body.model_dump())


@router.get("/cursos", response_model=List[CourseOut])
def list_courses(service: CourseService = Depends(get_course_service)):
    return service.list_all()


@router.get("/cursos/rango", response_model=List[CourseOut])
def list_courses_by_price_range(
    service: CourseService = Depends(get_course_service),
    precioMinimo: str = Query(..., description="最低價格（含）"),
    precioMaximo: str = Query(..., description="最高價格（含）"),
):
    return service.list_by_price_range(precioMinimo, precioMaximo)


@router.get("/cursos/nombre/{nombre}", response_model=List[CourseOut])
def list_courses_by_name(nombre: str, service: CourseService = Depends(get_course_service)):
    return service.list_by_name_prefix(nombre)


@router.get("/curso/{codigo}", response_model=CourseOut)
def get_course(codigo: str, service: CourseService = Depends(get_course_service)):
    return service.get_by_code(codigo)


@router.post("/curso", response_model=CourseOut)
def create_course(body: CourseIn, service: CourseService = Depends(get_course_service)):
    return service.create(to_model(body))


@router.post("/cursos", response_model=List[CourseOut])
def create_courses(body: List[CourseIn], service: CourseService = Depends(get_course_service)):
    return service.create_many([to_model(b) for b in body])


@router.put("/curso", response_model=CourseOut)
def update_course(body: CourseIn, service: CourseService = Depends(get_course_service)):
    return service.update(to_model(body))


@router.delete("/curso/{codigo}", status_code=status.HTTP_204_NO_CONTENT)
def delete_course(codigo: str, service: CourseService = Depends(get_course_service)):
    service.delete_by_code(codigo)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
