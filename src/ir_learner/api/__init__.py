"""Client for the Broadlink companion HTTP service."""

from .client import ThingsClient, ThingsFetchError, LearnRequestError
from .models import Thing, LearnRequest, LearnType

__all__ = [
    "ThingsClient",
    "ThingsFetchError",
    "LearnRequestError",
    "Thing",
    "LearnRequest",
    "LearnType",
]
