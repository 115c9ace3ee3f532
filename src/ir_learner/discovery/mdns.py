"""mDNS/Zeroconf discovery of openHAB servers hosting the Broadlink service."""

from typing import Callable, Optional
from dataclasses import dataclass, field
import ipaddress
import logging

from zeroconf import ServiceBrowser, ServiceInfo, ServiceListener, Zeroconf

logger = logging.getLogger(__name__)

HTTP_SERVICE = "_openhab-server._tcp.local."
HTTPS_SERVICE = "_openhab-server-ssl._tcp.local."

SERVLET_PATH = "/broadlink"


@dataclass
class DiscoveredServer:
    """An openHAB server announced on the local network."""

    service_type: str
    name: str
    host: str
    port: int
    properties: dict = field(default_factory=dict)

    @property
    def secure(self) -> bool:
        return self.service_type == HTTPS_SERVICE

    @property
    def service_url(self) -> str:
        """URL of the Broadlink service on this server."""
        scheme = "https" if self.secure else "http"
        host = self.host
        try:
            if ipaddress.ip_address(host).version == 6:
                host = f"[{host}]"
        except ValueError:
            pass
        return f"{scheme}://{host}:{self.port}{SERVLET_PATH}"


class MDNSListener(ServiceListener):
    """Listener that turns zeroconf announcements into DiscoveredServer."""

    def __init__(
        self,
        on_discovered: Callable[[DiscoveredServer], None],
        on_removed: Optional[Callable[[str], None]] = None,
    ):
        """Initialize the listener.

        Args:
            on_discovered: Callback when a server is found or updated
            on_removed: Callback with the service name when a server leaves
        """
        self._on_discovered = on_discovered
        self._on_removed = on_removed

    def add_service(self, zc: Zeroconf, type_: str, name: str) -> None:
        info = zc.get_service_info(type_, name)
        if info:
            self.handle_service_info(type_, name, info)

    def update_service(self, zc: Zeroconf, type_: str, name: str) -> None:
        info = zc.get_service_info(type_, name)
        if info:
            self.handle_service_info(type_, name, info)

    def remove_service(self, zc: Zeroconf, type_: str, name: str) -> None:
        logger.debug(f"Server gone: {name}")
        if self._on_removed:
            self._on_removed(name)

    def handle_service_info(self, service_type: str, name: str, info: ServiceInfo) -> None:
        """Convert service info and notify the callback."""
        addresses = info.parsed_addresses()
        if not addresses:
            logger.debug(f"Ignoring {name}: no address announced")
            return

        properties = {}
        for key, value in (info.properties or {}).items():
            key_str = key.decode("utf-8") if isinstance(key, bytes) else key
            if isinstance(value, bytes):
                try:
                    value = value.decode("utf-8")
                except UnicodeDecodeError:
                    value = value.hex()
            properties[key_str] = value

        server = DiscoveredServer(
            service_type=service_type,
            name=name,
            host=addresses[0],
            port=info.port,
            properties=properties,
        )

        logger.info(f"Discovered server {name} -> {server.service_url}")
        self._on_discovered(server)


class MDNSDiscovery:
    """Browses for openHAB servers until stopped."""

    SERVICE_TYPES = [HTTP_SERVICE, HTTPS_SERVICE]

    def __init__(self):
        self._zeroconf: Optional[Zeroconf] = None
        self._browsers: list[ServiceBrowser] = []
        self._running = False

    @property
    def is_running(self) -> bool:
        return self._running

    def start(
        self,
        on_discovered: Callable[[DiscoveredServer], None],
        on_removed: Optional[Callable[[str], None]] = None,
    ) -> bool:
        """Start browsing.

        Callbacks run on zeroconf's thread.

        Args:
            on_discovered: Callback when a server is found
            on_removed: Callback when a server is removed

        Returns:
            True if started successfully
        """
        if self._running:
            logger.warning("mDNS discovery already running")
            return True

        try:
            self._zeroconf = Zeroconf()
            listener = MDNSListener(on_discovered, on_removed)
            self._browsers = [
                ServiceBrowser(self._zeroconf, service_type, listener)
                for service_type in self.SERVICE_TYPES
            ]
        except OSError as e:
            logger.error(f"Failed to start mDNS discovery: {e}")
            self.stop()
            return False

        self._running = True
        logger.info("mDNS discovery started")
        return True

    def stop(self) -> None:
        """Stop browsing and release the socket."""
        for browser in self._browsers:
            browser.cancel()
        self._browsers.clear()

        if self._zeroconf:
            self._zeroconf.close()
            self._zeroconf = None

        if self._running:
            self._running = False
            logger.info("mDNS discovery stopped")
