"""
Custom exceptions for the site content admin API.

Raise these from managers and routes; the handler registered in main.py
turns them into JSON responses with the matching status code.

Usage:
    from exceptions import ContentNotFoundError

    if not doc:
        raise ContentNotFoundError("pricingPlans", plan_id)
"""

from typing import Optional, Any, Dict


class SiteContentError(Exception):
    """Base exception for all content admin errors"""

    status_code = 500

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "detail": self.message,
            "code": self.code,
            "details": self.details
        }


class ContentNotFoundError(SiteContentError):
    """Document does not exist in its collection"""

    status_code = 404

    def __init__(self, collection: str, document_id: str):
        super().__init__(
            f"Document '{document_id}' not found in {collection}",
            code="NOT_FOUND",
            details={"collection": collection, "document_id": document_id}
        )


class InvalidDocumentIdError(SiteContentError):
    """Id cannot be a store id"""

    status_code = 400

    def __init__(self, document_id: str):
        super().__init__(
            f"Invalid document id '{document_id}'",
            code="INVALID_ID",
            details={"document_id": document_id}
        )


class DeleteNotConfirmedError(SiteContentError):
    """Delete requested without the confirmation flag"""

    status_code = 400

    def __init__(self, collection: str, document_id: str):
        super().__init__(
            "Delete must be confirmed",
            code="DELETE_NOT_CONFIRMED",
            details={"collection": collection, "document_id": document_id}
        )


class StoreUnavailableError(SiteContentError):
    """Read or write against the document store failed"""

    status_code = 503

    def __init__(self, message: str = "Document store not available", operation: Optional[str] = None):
        super().__init__(
            message,
            code="STORE_UNAVAILABLE",
            details={"operation": operation} if operation else None
        )


class UnsupportedPlatformError(SiteContentError):
    """Platform could not be determined for a video URL"""

    status_code = 422

    def __init__(self, url: str):
        super().__init__(
            "Could not determine the platform for this URL",
            code="UNSUPPORTED_PLATFORM",
            details={"url": url}
        )
