"""
Exception classes for the application.
"""

from typing import Dict, List, Optional

from fastapi import HTTPException, status


class ValidationError(HTTPException):
    """Raised when a draft fails its schema on submit."""

    def __init__(self, message: str, errors: Optional[Dict[str, str]] = None):
        detail = {"message": message, "errors": errors or {}}
        super().__init__(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=detail
        )
        self.errors = errors or {}


class NotFoundError(HTTPException):
    """Raised when a requested store, record or session is not found."""

    def __init__(self, resource_type: str, resource_id):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{resource_type} not found",
        )
        self.resource_id = resource_id


class ConflictError(HTTPException):
    """Raised on an invalid session transition or a stale edit."""

    def __init__(self, message: str):
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=message)


class StorageError(HTTPException):
    """Raised when the durable medium rejects a write."""

    def __init__(
        self,
        message: str = "Storage write failed",
        acknowledgments: Optional[List[Dict[str, str]]] = None,
    ):
        detail = message
        if acknowledgments is not None:
            detail = {"message": message, "acknowledgments": acknowledgments}
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail
        )
        self.acknowledgments = acknowledgments or []
