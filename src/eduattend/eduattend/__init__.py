"""EduAttend classroom backend.

Feature modules (classrooms, ...) follow the same split as the rest of the
codebase: a thin Flask controller, a service holding the business rules and a
repository interface with a MySQL implementation.
"""
