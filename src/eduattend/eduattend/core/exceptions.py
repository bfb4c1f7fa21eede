class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a requested aggregate does not exist."""


class ClassroomNotFoundError(NotFoundError):
    def __init__(self, classroom_id: str):
        self.classroom_id = classroom_id
        super().__init__(f"Classroom not found with id: {classroom_id}")


class JoinCodeNotFoundError(NotFoundError):
    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Invalid classroom code: {code}")
