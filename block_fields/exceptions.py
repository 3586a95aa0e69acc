"""
Custom Exception Classes for Block Fields

This module defines custom exceptions for better error handling and
consistent error responses across the admin API and the renderer.
"""

from typing import Any

from fastapi import status


class BlockFieldsError(Exception):
    """Base exception class for all block field exceptions"""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


# ============================================================================
# Resource Not Found Exceptions
# ============================================================================


class ResourceNotFoundError(BlockFieldsError):
    """Base class for resource not found errors"""

    def __init__(self, resource_type: str, resource_id: Any | None = None):
        message = f"{resource_type} not found"
        if resource_id is not None:
            message = f"{resource_type} '{resource_id}' not found"
        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details={"resource_type": resource_type, "resource_id": resource_id},
        )


class BlockNotFoundError(ResourceNotFoundError):
    """Raised when a block is not found in the store"""

    def __init__(self, slug: str | None = None):
        super().__init__(resource_type="Block", resource_id=slug)


class ControlNotFoundError(ResourceNotFoundError):
    """Raised when a control name is not registered"""

    def __init__(self, name: str | None = None):
        super().__init__(resource_type="Control", resource_id=name)


class TemplateNotFoundError(ResourceNotFoundError):
    """Raised when no template file matches a block"""

    def __init__(self, template: str | None = None):
        super().__init__(resource_type="Template", resource_id=template)


# ============================================================================
# Validation Exceptions
# ============================================================================


class ValidationError(BlockFieldsError):
    """Raised when submitted block or field data is invalid"""

    def __init__(self, message: str, field: str | None = None, details: dict[str, Any] | None = None):
        error_details = details or {}
        if field:
            error_details["field"] = field
        super().__init__(message=message, status_code=status.HTTP_400_BAD_REQUEST, details=error_details)


class DuplicateFieldError(BlockFieldsError):
    """Raised when a field name is used twice within one block"""

    def __init__(self, block: str, field: str):
        super().__init__(
            message=f"Field '{field}' already exists in block '{block}'",
            status_code=status.HTTP_409_CONFLICT,
            details={"block": block, "field": field},
        )
