"""Exceptions raised by LaunchList services."""


class LaunchListError(Exception):
    """Base class for LaunchList errors."""


class LaunchSourceError(LaunchListError):
    """The remote launch collection could not be read.

    Covers transport failures (network, timeout, HTTP status) and
    payloads that do not decode into launch records.
    """
