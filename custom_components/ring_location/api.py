"""Interface to the Ring account client.

The account client owns the cloud session and its reconnection logic. This
integration only consumes the location level objects it hands out.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Protocol

from homeassistant.core import CALLBACK_TYPE
from homeassistant.exceptions import HomeAssistantError


class RingApiError(HomeAssistantError):
    """Exception to indicate an API error occurred."""


class RingConnectionError(HomeAssistantError):
    """Exception to indicate a connection error occurred."""


@dataclass(frozen=True)
class RingDeviceData:
    """Telemetry reported for a location device."""

    device_type: str
    status: str = "ok"
    faulted: bool = False
    tamper_status: str = "ok"
    battery_level: int | None = None
    battery_status: str = "none"
    flood_faulted: bool | None = None
    locked: str | None = None
    serial_number: str | None = None


class RingDevice(Protocol):
    """A generic location device (sensor, lock, ...)."""

    id: str
    name: str

    @property
    def data(self) -> RingDeviceData:
        """Return the latest telemetry."""

    def subscribe_data(
        self, callback: Callable[[RingDeviceData], None]
    ) -> CALLBACK_TYPE:
        """Register for telemetry updates, returning an unsubscribe callable."""

    async def async_send_command(self, command: str) -> None:
        """Send a command to the device."""


class RingCamera(Protocol):
    """A camera or doorbell attached to a location."""

    id: int
    name: str
    model: str
    data: Mapping[str, Any]
    is_doorbot: bool
    is_ring_edge_enabled: bool
    operating_on_battery: bool
    has_light: bool
    has_siren: bool
    battery_level: int | None

    def subscribe_motion(self, callback: Callable[[bool], None]) -> CALLBACK_TYPE:
        """Register for motion start/stop."""

    def subscribe_ding(self, callback: Callable[[bool], None]) -> CALLBACK_TYPE:
        """Register for doorbell press start/stop."""


class RingSecurityPanel(Protocol):
    """The security panel of a location."""

    def subscribe_data(
        self, callback: Callable[[RingDeviceData], None]
    ) -> CALLBACK_TYPE:
        """Register for panel telemetry updates."""


class RingLocation(Protocol):
    """A location of the Ring account.

    All coroutines raise RingApiError or RingConnectionError on failure.
    """

    id: str
    name: str
    has_alarm_base_station: bool

    @property
    def cameras(self) -> Sequence[RingCamera]:
        """Return the cameras of the location."""

    async def async_get_devices(self) -> list[RingDevice]:
        """Enumerate the location devices."""

    def subscribe_location_mode(
        self, callback: Callable[[str], None]
    ) -> CALLBACK_TYPE:
        """Register for location mode changes."""

    async def async_get_security_panel(self) -> RingSecurityPanel:
        """Resolve the security panel, raising if the location has none."""

    async def async_get_location_mode(self) -> str:
        """Query the current location mode."""

    async def async_arm_away(
        self, bypass_sensor_ids: Sequence[str] | None = None
    ) -> None:
        """Arm the location in away mode."""

    async def async_arm_home(
        self, bypass_sensor_ids: Sequence[str] | None = None
    ) -> None:
        """Arm the location in home mode."""

    async def async_disarm(self) -> None:
        """Disarm the location."""


class RingAccount(Protocol):
    """The account level client."""

    async def async_get_location(self, location_id: str) -> RingLocation:
        """Return the location with the given id."""
