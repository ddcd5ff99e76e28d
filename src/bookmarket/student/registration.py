"""Student sign-up, profile edits and account removal."""

from protean.exceptions import ValidationError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from bookmarket.domain import bookmarket, logger
from bookmarket.student.student import Student


@bookmarket.command(part_of="Student")
class RegisterStudent:
    name = String(required=True, max_length=200)
    phone = String(required=True, max_length=20)
    password = String(required=True, max_length=128)
    address = Text()
    grade = String(max_length=20)


@bookmarket.command(part_of="Student")
class UpdateStudentProfile:
    student_id = Identifier(required=True)
    name = String(max_length=200)
    address = Text()
    grade = String(max_length=20)


@bookmarket.command(part_of="Student")
class RemoveStudent:
    student_id = Identifier(required=True)


@bookmarket.command_handler(part_of=Student)
class StudentAccountHandler:
    @handle(RegisterStudent)
    def register_student(self, command):
        repo = current_domain.repository_for(Student)
        if repo.find_by_phone(command.phone) is not None:
            raise ValidationError({"phone": ["Phone number already registered"]})

        student = Student.register(
            name=command.name,
            phone=command.phone,
            password=command.password,
            address=command.address,
            grade=command.grade,
        )
        repo.add(student)
        logger.info("Student registered", student_id=str(student.id))
        return str(student.id)

    @handle(UpdateStudentProfile)
    def update_profile(self, command):
        repo = current_domain.repository_for(Student)
        student = repo.get(command.student_id)
        student.update_profile(name=command.name, address=command.address, grade=command.grade)
        repo.add(student)

    @handle(RemoveStudent)
    def remove_student(self, command):
        """Delete the account. Orders keep their name/phone/address snapshot."""
        repo = current_domain.repository_for(Student)
        student = repo.get(command.student_id)
        repo._dao.delete(student)
        logger.info("Student removed", student_id=str(command.student_id))
