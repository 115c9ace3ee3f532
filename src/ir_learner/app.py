"""Main application orchestrator."""

import argparse
import customtkinter as ctk
import logging
import sys
from typing import Optional

from .api.client import ThingsClient
from .api.models import LearnType, Thing
from .core.events import Event, EventBus, EventType
from .gui.controller import ThingListController
from .gui.main_window import MainWindow
from .i18n import _, init_translator
from .storage.settings import AppSettings, SettingsManager
from .utils.async_helpers import AsyncBridge

logger = logging.getLogger(__name__)


class IRLearnerApp:
    """Main application class that wires the client, controller and window."""

    def __init__(self, service_url: Optional[str] = None, debug: bool = False):
        """Initialize the application.

        Args:
            service_url: Overrides the stored service URL for this session
            debug: Enable debug logging
        """
        self._setup_logging(debug)

        logger.info("Initializing IR Learner")

        self.event_bus = EventBus()
        self.settings = SettingsManager()
        self.async_bridge = AsyncBridge()

        settings = self.settings.load()
        self._service_url = service_url or settings.service_url

        init_translator(settings.language)
        ctk.set_appearance_mode(settings.theme)
        ctk.set_default_color_theme("blue")

        self.client = self._create_client(settings)

        self.window = MainWindow(
            self,
            on_learn=self._handle_learn,
            on_refresh=self.refresh,
            on_settings_saved=self._handle_settings_saved,
            on_close=self.quit,
        )

        self.controller = ThingListController(
            self.client,
            view=self.window,
            notifier=self.window,
            dispatch=self.window.schedule,
            submit=self.async_bridge.submit,
            event_bus=self.event_bus,
        )

        self._setup_event_handlers()

    @property
    def service_url(self) -> str:
        """URL of the companion service in use."""
        return self._service_url

    def _setup_logging(self, debug: bool) -> None:
        logging.basicConfig(
            level=logging.DEBUG if debug else logging.INFO,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            handlers=[
                logging.StreamHandler(sys.stdout),
            ],
        )

    def _create_client(self, settings: AppSettings) -> ThingsClient:
        return ThingsClient(
            self._service_url,
            learn_path=settings.learn_path,
            timeout=settings.request_timeout,
        )

    def _setup_event_handlers(self) -> None:
        """Route background events to the status bar on the GUI thread."""
        self.event_bus.subscribe(EventType.THINGS_LOADED, self._on_things_loaded)
        self.event_bus.subscribe(EventType.THINGS_LOAD_FAILED, self._on_things_load_failed)
        self.event_bus.subscribe(EventType.LEARN_REQUESTED, self._on_learn_requested)
        self.event_bus.subscribe(EventType.LEARN_FAILED, self._on_learn_failed)

    def _set_status_later(self, message: str) -> None:
        self.window.schedule(lambda: self.window.set_status(message))

    def _on_things_loaded(self, event: Event) -> None:
        self._set_status_later(_("things_loaded", url=self.client.base_url))

    def _on_things_load_failed(self, event: Event) -> None:
        self._set_status_later(_("load_failed", error=event.data))

    def _on_learn_requested(self, event: Event) -> None:
        request = event.data
        self._set_status_later(_("learn_sent", command=request.command, thing=request.thing))

    def _on_learn_failed(self, event: Event) -> None:
        request, error = event.data
        self._set_status_later(_("learn_failed", thing=request.thing, error=error))

    def refresh(self) -> None:
        """Reload the thing list."""
        self.controller.request_refresh()

    def _handle_learn(self, thing: Thing, command: str, learn_type: LearnType) -> None:
        self.controller.trigger_learn(thing, command, learn_type)

    def _handle_settings_saved(self, settings: AppSettings) -> None:
        """Point the controller at the (possibly new) service and reload."""
        self._service_url = settings.service_url
        old_client = self.client
        self.client = self._create_client(settings)
        self.controller.set_client(self.client)
        self.async_bridge.submit(old_client.close())
        self.refresh()

    def run(self) -> None:
        """Start the application."""
        logger.info(f"Starting IR Learner against {self._service_url}")

        self.async_bridge.start()

        if self.settings.load().refresh_on_start:
            self.window.schedule(self.window.refresh)

        self.window.mainloop()

        self._cleanup()

    def _cleanup(self) -> None:
        """Close the HTTP session and stop the background loop."""
        logger.info("Cleaning up...")

        if self.async_bridge.is_running:
            try:
                self.async_bridge.run_blocking(self.client.close())
            except Exception as e:
                logger.error(f"Error closing HTTP client: {e}")

        self.async_bridge.stop()

    def quit(self) -> None:
        """Quit the application."""
        logger.info("Quitting application")
        self.window.quit()
        self.window.destroy()


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="ir-learner",
        description="Learn IR codes on Broadlink remotes managed by openHAB.",
    )
    parser.add_argument(
        "--url",
        help="service URL, e.g. http://openhab.local:8080/broadlink (overrides settings)",
    )
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> None:
    """Application entry point."""
    args = parse_args(argv)
    app = IRLearnerApp(service_url=args.url, debug=args.debug)
    app.run()


if __name__ == "__main__":
    main()
