"""FastAPI routes for student accounts."""

from fastapi import APIRouter
from protean.utils.globals import current_domain

from bookmarket.api.schemas import (
    LoginRequest,
    RegisterStudentRequest,
    StatusResponse,
    StudentIdResponse,
    StudentLoginResponse,
    StudentResponse,
    UpdateStudentRequest,
)
from bookmarket.student.access import authenticate_student
from bookmarket.student.registration import RegisterStudent, UpdateStudentProfile
from bookmarket.student.student import Student

student_router = APIRouter(prefix="/students", tags=["students"])


@student_router.post("/register", status_code=201, response_model=StudentIdResponse)
async def register_student(body: RegisterStudentRequest) -> StudentIdResponse:
    command = RegisterStudent(
        name=body.name,
        phone=body.phone,
        password=body.password,
        address=body.address,
        grade=body.grade,
    )
    result = current_domain.process(command, asynchronous=False)
    return StudentIdResponse(student_id=result)


@student_router.post("/login", response_model=StudentLoginResponse)
async def login_student(body: LoginRequest) -> StudentLoginResponse:
    student = authenticate_student(body.phone, body.password)
    return StudentLoginResponse(student_id=str(student.id), student_name=student.name, student_phone=student.phone)


@student_router.get("/{student_id}", response_model=StudentResponse)
async def get_student(student_id: str) -> StudentResponse:
    student = current_domain.repository_for(Student).get(student_id)
    return StudentResponse(
        id=str(student.id),
        name=student.name,
        phone=student.phone,
        address=student.address,
        grade=student.grade,
    )


@student_router.put("/{student_id}", response_model=StatusResponse)
async def update_student(student_id: str, body: UpdateStudentRequest) -> StatusResponse:
    command = UpdateStudentProfile(
        student_id=student_id,
        name=body.name,
        address=body.address,
        grade=body.grade,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()
