"""Remote data services."""

from .launch_client import SpaceXLaunchClient

__all__ = ["SpaceXLaunchClient"]
