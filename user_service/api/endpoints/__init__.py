"""
Endpoint callables, keyed by the operation id of their route descriptor.
"""

from user_service.api.endpoints.users import get_user_by_id

ENDPOINTS = {
    "get_user_by_id": get_user_by_id,
}

__all__ = ["ENDPOINTS", "get_user_by_id"]
