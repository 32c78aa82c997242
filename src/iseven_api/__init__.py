"""Cliente Python de la API isEven (https://isevenapi.xyz).

Uso rápido:

    from iseven_api import iseven_get_blocking

    result = iseven_get_blocking(42)
    result.is_even        # True
    result.advertisement  # texto publicitario
"""

from iseven_api.adapters.iseven_client import (
    ApiResponse,
    BlockingIsEvenClient,
    IsEvenClient,
    iseven_get,
    iseven_get_blocking,
)
from iseven_api.core.config import API_URL, AppSettings
from iseven_api.core.domain.errors import (
    InvalidNumberError,
    IsEvenError,
    NetworkError,
    NumberOutOfRangeError,
    ServerError,
    UnknownServerError,
)
from iseven_api.core.domain.models import ErrorResponse, IsEven
from iseven_api.core.services.request_builder import build_request_url
from iseven_api.core.services.response_interpreter import interpret_response

__version__ = "0.7.0"

__all__ = [
    "API_URL",
    "ApiResponse",
    "AppSettings",
    "BlockingIsEvenClient",
    "ErrorResponse",
    "InvalidNumberError",
    "IsEven",
    "IsEvenClient",
    "IsEvenError",
    "NetworkError",
    "NumberOutOfRangeError",
    "ServerError",
    "UnknownServerError",
    "build_request_url",
    "interpret_response",
    "iseven_get",
    "iseven_get_blocking",
]
