"""
Schemas package - Data Transfer Objects and validation.

This package contains DTOs that define the API contracts
and handle request validation.
"""

from .dtos import (
    AppointmentCreateRequest,
    AppointmentResponse,
    AppointmentUpdateRequest,
    ClientRequest,
    ErrorResponse,
    MarketingMessageRequest,
    ProductRequest,
    client_to_dict,
    product_to_dict,
    profile_to_dict,
)

__all__ = [
    # Appointment DTOs
    "AppointmentCreateRequest",
    "AppointmentUpdateRequest",
    "AppointmentResponse",
    # Client / inventory DTOs
    "ClientRequest",
    "ProductRequest",
    "client_to_dict",
    "product_to_dict",
    "profile_to_dict",
    # Marketing DTOs
    "MarketingMessageRequest",
    # Common DTOs
    "ErrorResponse",
]
