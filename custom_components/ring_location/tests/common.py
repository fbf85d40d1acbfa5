"""Fake Ring client objects for tests."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Any
from unittest.mock import AsyncMock

from custom_components.ring_location.api import RingApiError, RingDeviceData


class FakeFeed:
    """A push feed that records its subscribers."""

    def __init__(self) -> None:
        self.callbacks: list[Callable[[Any], None]] = []

    def subscribe(self, callback: Callable[[Any], None]) -> Callable[[], None]:
        self.callbacks.append(callback)

        def unsubscribe() -> None:
            self.callbacks.remove(callback)

        return unsubscribe

    def emit(self, value: Any) -> None:
        for callback in list(self.callbacks):
            callback(value)


@dataclass
class FakeDevice:
    """A location device."""

    id: str
    name: str
    data: RingDeviceData
    feed: FakeFeed = field(default_factory=FakeFeed)
    commands: list[str] = field(default_factory=list)

    def subscribe_data(self, callback):
        return self.feed.subscribe(callback)

    async def async_send_command(self, command: str) -> None:
        self.commands.append(command)

    def update(self, **changes: Any) -> None:
        self.data = replace(self.data, **changes)
        self.feed.emit(self.data)


@dataclass
class FakeCamera:
    """A camera or doorbell."""

    id: int
    name: str
    model: str = "Stick Up Cam"
    data: dict[str, Any] = field(
        default_factory=lambda: {
            "kind": "stickup_cam_v4",
            "firmware_version": "cam-1.4.26",
            "device_id": "a1b2c3",
        }
    )
    is_doorbot: bool = False
    is_ring_edge_enabled: bool = False
    operating_on_battery: bool = False
    has_light: bool = False
    has_siren: bool = False
    battery_level: int | None = None
    motion: FakeFeed = field(default_factory=FakeFeed)
    ding: FakeFeed = field(default_factory=FakeFeed)

    def subscribe_motion(self, callback):
        return self.motion.subscribe(callback)

    def subscribe_ding(self, callback):
        return self.ding.subscribe(callback)


class FakePanel:
    """A security panel."""

    def __init__(self) -> None:
        self.feed = FakeFeed()

    def subscribe_data(self, callback):
        return self.feed.subscribe(callback)


class FakeLocation:
    """A location with scripted responses."""

    def __init__(
        self,
        location_id: str = "location-1",
        name: str = "Home",
        cameras: list[FakeCamera] | None = None,
        devices: list[FakeDevice] | None = None,
        panel: FakePanel | None = None,
        has_alarm_base_station: bool = False,
        mode: str = "disarmed",
    ) -> None:
        self.id = location_id
        self.name = name
        self.cameras = cameras or []
        self.devices = devices or []
        self.panel = panel
        self.has_alarm_base_station = has_alarm_base_station
        self.mode = mode
        self.mode_error: Exception | None = None
        self.devices_error: Exception | None = None
        # When set, mode queries wait for it before answering
        self.mode_gate: asyncio.Event | None = None
        self.mode_queries = 0
        self.mode_feed = FakeFeed()
        self.async_arm_away = AsyncMock()
        self.async_arm_home = AsyncMock()
        self.async_disarm = AsyncMock()

    async def async_get_devices(self) -> list[FakeDevice]:
        if self.devices_error:
            raise self.devices_error
        return list(self.devices)

    def subscribe_location_mode(self, callback):
        return self.mode_feed.subscribe(callback)

    async def async_get_security_panel(self) -> FakePanel:
        if self.panel is None:
            raise RingApiError("Could not find a security panel for location")
        return self.panel

    async def async_get_location_mode(self) -> str:
        self.mode_queries += 1
        mode = self.mode
        if self.mode_gate is not None:
            await self.mode_gate.wait()
        if self.mode_error:
            raise self.mode_error
        return mode


class FakeAccount:
    """An account serving a set of locations."""

    def __init__(self, *locations: FakeLocation) -> None:
        self.locations = {location.id: location for location in locations}

    async def async_get_location(self, location_id: str) -> FakeLocation:
        if location_id not in self.locations:
            raise RingApiError(f"Unknown location {location_id}")
        return self.locations[location_id]


def contact_sensor(
    device_id: str, faulted: bool = False, battery_status: str = "full"
) -> FakeDevice:
    """Return a contact sensor."""
    return FakeDevice(
        id=device_id,
        name=f"Door {device_id}",
        data=RingDeviceData(
            device_type="sensor.contact",
            faulted=faulted,
            battery_level=90,
            battery_status=battery_status,
            serial_number=f"SN-{device_id}",
        ),
    )


def lock_device(device_id: str, locked: str = "locked") -> FakeDevice:
    """Return a smart lock."""
    return FakeDevice(
        id=device_id,
        name=f"Lock {device_id}",
        data=RingDeviceData(device_type="lock", locked=locked, battery_status="none"),
    )


