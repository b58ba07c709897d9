"""Domain services."""

from .authorization import OwnershipPolicy
from .base import Service
from .generator import Clock, IdGenerator, SystemClock, UuidIdGenerator
from .jwt_service import JWTService

__all__ = [
    "Clock",
    "IdGenerator",
    "JWTService",
    "OwnershipPolicy",
    "Service",
    "SystemClock",
    "UuidIdGenerator",
]
