from .common import CamelModel, InternalErrorResponse, RouteNotFoundResponse
from .health import HealthStatus
from .info import RuntimeInfo, WelcomeInfo
from .sample import RANDOM_UPPER_BOUND, RandomSample

__all__ = [
    # common
    "CamelModel",
    "RouteNotFoundResponse",
    "InternalErrorResponse",
    # health
    "HealthStatus",
    # info
    "WelcomeInfo",
    "RuntimeInfo",
    # sample
    "RANDOM_UPPER_BOUND",
    "RandomSample",
]
