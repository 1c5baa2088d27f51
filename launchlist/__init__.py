"""LaunchList: infinite-scroll browser for a paginated launch collection."""

__version__ = "0.1.0"
