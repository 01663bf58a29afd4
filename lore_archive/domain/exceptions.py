from typing import Iterable


class DomainError(Exception):
    status_code = 500


class NotFoundError(DomainError):
    status_code = 404

    def __init__(self, entity: str):
        self.entity = entity
        super().__init__(f"{entity[:1].upper()}{entity[1:]} not found")


class InvalidIdentifierError(DomainError):
    status_code = 400

    def __init__(self, entity: str):
        self.entity = entity
        super().__init__(f"Invalid {entity} ID")


class ValidationError(DomainError):
    status_code = 400

    def __init__(self, messages: Iterable[str]):
        self.messages = list(messages)
        super().__init__(f"Validation Error: {', '.join(self.messages)}")


class DuplicateEntryError(DomainError):
    status_code = 409

    def __init__(self, message: str = "Duplicate entry"):
        super().__init__(message)


class RepositoryError(DomainError):
    status_code = 500

    def __init__(self, operation: str, entity: str):
        self.operation = operation
        self.entity = entity
        super().__init__(f"Failed to {operation} {entity}")
