from pydantic import BaseModel
from typing import Optional, Any
from enum import Enum

# ------------------------------- Base Models ------------------------------- #

class ApiStatus(str, Enum):
    """Standard API response statuses"""
    SUCCESS = "success"
    ERROR = "error"
    VALIDATION_ERROR = "validation_error"
    NOT_FOUND = "not_found"

class BaseResponse(BaseModel):
    """
    Base response model that all API responses should extend.
    Provides consistent structure across all endpoints.
    """
    status: ApiStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[str] = None
    timestamp: Optional[str] = None

    class Config:
        use_enum_values = True

# ------------------------------- Response Helpers ------------------------------- #

def error_response(
    message: str = "An error occurred",
    status: ApiStatus = ApiStatus.ERROR,
    error_code: Optional[str] = None,
    data: Any = None,
    timestamp: Optional[str] = None
) -> dict:
    """Helper function to create a standardized error response"""
    return {
        "status": status.value,
        "message": message,
        "data": data,
        "error_code": error_code,
        "timestamp": timestamp
    }

# ------------------------------- Pagination Models ------------------------------- #

class PaginatedResponse(BaseModel):
    """Paginated response wrapper"""
    items: list[Any]
    total: int
    page: int
    limit: int
    total_pages: int
    has_next: bool
    has_prev: bool

def paginate(items: list, page: int, limit: int) -> PaginatedResponse:
    """Slice one page out of an already filtered and sorted list."""
    total = len(items)
    total_pages = (total + limit - 1) // limit if total else 0
    start = (page - 1) * limit
    return PaginatedResponse(
        items=items[start:start + limit],
        total=total,
        page=page,
        limit=limit,
        total_pages=total_pages,
        has_next=page < total_pages,
        has_prev=page > 1,
    )
