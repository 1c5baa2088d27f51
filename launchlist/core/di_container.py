"""Dependency injection container."""

from dataclasses import dataclass, field
from typing import Optional

from launchlist.config import AppPaths, AppSettings
from launchlist.managers import ListController
from launchlist.services import SpaceXLaunchClient


@dataclass
class AppContainer:
    settings: AppSettings
    paths: AppPaths

    _launch_client: Optional[SpaceXLaunchClient] = field(
        default=None, init=False, repr=False
    )

    @property
    def launch_client(self) -> SpaceXLaunchClient:
        if self._launch_client is None:
            self._launch_client = SpaceXLaunchClient(
                self.settings.source.base_url,
                timeout=self.settings.source.request_timeout,
            )
        return self._launch_client

    def create_list_controller(self, on_change=None) -> ListController:
        return ListController(
            self.launch_client,
            page_size=self.settings.display.page_size,
            search_limit=self.settings.display.search_limit,
            on_change=on_change,
        )

    @classmethod
    def create(
        cls,
        settings: Optional[AppSettings] = None,
        paths: Optional[AppPaths] = None,
    ) -> "AppContainer":
        paths = paths or AppPaths.default()
        return cls(
            settings=settings or AppSettings.load(str(paths.config_path)),
            paths=paths,
        )
