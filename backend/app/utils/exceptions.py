"""
Custom exception classes
"""
from fastapi import HTTPException


class NotFoundError(HTTPException):
    """Raised when an entity id does not resolve"""
    def __init__(self, entity: str, entity_id: str):
        super().__init__(
            status_code=404,
            detail=f"{entity} {entity_id} not found"
        )


class UnauthorizedError(HTTPException):
    """Raised when user doesn't own resource"""
    def __init__(self, action: str = "access this resource"):
        super().__init__(
            status_code=403,
            detail=f"Not authorized to {action}"
        )


class BadRequestError(HTTPException):
    """Raised when input or an operation precondition is invalid"""
    def __init__(self, reason: str):
        super().__init__(
            status_code=400,
            detail=reason
        )


class InternalServiceError(HTTPException):
    """Raised when an external collaborator fails"""
    def __init__(self, reason: str = "Internal server error"):
        super().__init__(
            status_code=500,
            detail=reason
        )


class SummarizationError(Exception):
    """Raised by the summarizer when the model call fails"""
