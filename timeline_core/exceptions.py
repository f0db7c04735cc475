# timeline_core/exceptions.py
from __future__ import annotations


class DomainError(Exception):
    """Base class for domain-level errors."""
    def __init__(self, message: str, *, code: str | None = None):
        super().__init__(message)
        self.code = code or self.__class__.__name__


class ValidationError(DomainError):
    """Raised when data is invalid or violates constraints."""


class BusinessRuleError(DomainError):
    """Raised when business rules are violated (e.g., circular dependencies)."""


class DuplicateIdError(ValidationError):
    """Raised in strict mode when two tasks of one batch share an id."""
    def __init__(self, task_id: str):
        super().__init__(
            f"Task id '{task_id}' appears more than once in the batch.",
            code="TASK_DUPLICATE_ID",
        )
        self.task_id = task_id


class UnknownDependencyError(ValidationError):
    """Raised in strict mode when a dependency points outside the batch."""
    def __init__(self, task_id: str, dependency_id: str):
        super().__init__(
            f"Task '{task_id}' depends on unknown task '{dependency_id}'.",
            code="DEPENDENCY_UNKNOWN",
        )
        self.task_id = task_id
        self.dependency_id = dependency_id


class CycleDetectedError(BusinessRuleError):
    """Raised in strict mode when the dependency graph contains a cycle."""
    def __init__(self, cycle: list[str]):
        super().__init__(
            "Cannot analyze schedule: circular dependency detected "
            f"({' -> '.join(cycle)}).",
            code="SCHEDULE_CYCLE",
        )
        self.cycle = list(cycle)


__all__ = [
    "DomainError",
    "ValidationError",
    "BusinessRuleError",
    "DuplicateIdError",
    "UnknownDependencyError",
    "CycleDetectedError",
]
