"""
Typed failures raised by the mock data engine.

Each error carries a machine-readable code and the HTTP status the API layer
should answer with. The Flask error handlers turn them into:

    {"error": {"code": "ACCOUNT_NOT_FOUND", "message": "Account not found: 999-999-9999"}}
"""

from typing import Any, Dict, Optional


class MockApiError(Exception):
    """Base error with code, status and optional details."""

    def __init__(self, message: str, code: str = "INTERNAL_ERROR", status: int = 500, details: Any = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status = status
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details is not None:
            payload["details"] = self.details
        return payload


class AccountNotFoundError(MockApiError):
    def __init__(self, account_id: str):
        super().__init__(f"Account not found: {account_id}", "ACCOUNT_NOT_FOUND", 404)
        self.account_id = account_id


class EntityNotFoundError(MockApiError):
    """A campaign or ad group id that does not exist in the account."""

    def __init__(self, entity_type: str, entity_id: str):
        super().__init__(f"{entity_type} not found: {entity_id}", f"{entity_type.upper().replace(' ', '_')}_NOT_FOUND", 404)
        self.entity_id = entity_id


class InvalidRequestError(MockApiError):
    def __init__(self, details: Optional[list] = None, message: str = "Invalid request body"):
        super().__init__(message, "INVALID_REQUEST", 400, details)
