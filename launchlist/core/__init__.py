"""Core models, errors and ports."""

from .errors import LaunchListError, LaunchSourceError
from .models import Launch, LaunchLinks
from .protocols import LaunchSourcePort, ObservationPort, ObserveFn

__all__ = [
    "Launch",
    "LaunchLinks",
    "LaunchListError",
    "LaunchSourceError",
    "LaunchSourcePort",
    "ObservationPort",
    "ObserveFn",
]
