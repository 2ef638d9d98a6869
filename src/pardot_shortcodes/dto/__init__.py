"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for request/response validation and serialization.

Internal domain logic should use entities from the entities package.
"""

from .requests import DynamicContentShortcodeRequest, FormShortcodeRequest
from .responses import HealthCheckResponse, RefreshResponse, ShortcodeResponse

__all__ = [
    "FormShortcodeRequest",
    "DynamicContentShortcodeRequest",
    "ShortcodeResponse",
    "RefreshResponse",
    "HealthCheckResponse",
]
