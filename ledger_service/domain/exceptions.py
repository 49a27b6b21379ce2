"""Domain-specific exceptions"""

from typing import Dict, List, Optional


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ValidationError(DomainException):
    """Input failed a format check; carries field-level details when known"""

    def __init__(self, message: str, details: Optional[List[Dict[str, str]]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or []


class NotFoundError(DomainException):
    """Requested resource does not exist"""

    def __init__(self, resource: str, resource_id: str):
        super().__init__(f"{resource} with ID {resource_id} does not exist")
        self.resource = resource
        self.resource_id = resource_id
