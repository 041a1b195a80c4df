"""Comment area use cases."""

from .create_area import CreateAreaRequest, CreateAreaUseCase
from .delete_area import DeleteAreaRequest, DeleteAreaResponse, DeleteAreaUseCase
from .get_area import AreaResponse, GetAreaRequest, GetAreaResponse, GetAreaUseCase
from .toggle_area_hidden import (
    ToggleAreaHiddenRequest,
    ToggleAreaHiddenResponse,
    ToggleAreaHiddenUseCase,
)

__all__ = [
    "AreaResponse",
    "CreateAreaRequest",
    "CreateAreaUseCase",
    "DeleteAreaRequest",
    "DeleteAreaResponse",
    "DeleteAreaUseCase",
    "GetAreaRequest",
    "GetAreaResponse",
    "GetAreaUseCase",
    "ToggleAreaHiddenRequest",
    "ToggleAreaHiddenResponse",
    "ToggleAreaHiddenUseCase",
]
