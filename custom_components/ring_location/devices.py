"""Local device instances backed by Ring telemetry."""

from __future__ import annotations

from collections.abc import Callable
import logging
from typing import Any

from homeassistant.core import CALLBACK_TYPE, callback

from .api import RingCamera, RingDevice, RingDeviceData
from .const import COMMAND_LOCK, COMMAND_UNLOCK, TAMPER_STATUS_TAMPER
from .models import Capability, DeviceDescriptor

_LOGGER = logging.getLogger(__name__)

# Capability -> value read from sensor telemetry
SENSOR_VALUES: dict[Capability, Callable[[RingDeviceData], Any]] = {
    Capability.TAMPER_SENSOR: lambda data: data.tamper_status == TAMPER_STATUS_TAMPER,
    Capability.BATTERY: lambda data: data.battery_level,
    Capability.ENTRY_SENSOR: lambda data: data.faulted,
    Capability.MOTION_SENSOR: lambda data: data.faulted,
    Capability.FLOOD_SENSOR: lambda data: bool(data.flood_faulted or data.faulted),
}

LOCK_STATES = {"locked", "unlocked", "jammed"}

LOCK_VALUES: dict[Capability, Callable[[RingDeviceData], Any]] = {
    Capability.BATTERY: lambda data: data.battery_level,
    Capability.LOCK: lambda data: data.locked if data.locked in LOCK_STATES else None,
}


class RingLocalDevice:
    """Base class for local devices.

    Only the capabilities declared by the descriptor carry values.
    """

    def __init__(self, descriptor: DeviceDescriptor) -> None:
        """Initialize the device."""
        self.descriptor = descriptor
        self.values: dict[Capability, Any] = {}
        self._listeners: dict[CALLBACK_TYPE, CALLBACK_TYPE] = {}

    @property
    def native_id(self) -> str:
        """Return the local identifier."""
        return self.descriptor.native_id

    @property
    def capabilities(self) -> tuple[Capability, ...]:
        """Return the declared capabilities."""
        return self.descriptor.capabilities

    def get(self, capability: Capability) -> Any:
        """Return the value of a declared capability.

        Raises:
            KeyError: If the device does not declare the capability

        """
        if capability not in self.capabilities:
            raise KeyError(f"{self.native_id} does not provide {capability}")
        return self.values.get(capability)

    @callback
    def async_add_listener(self, update_callback: CALLBACK_TYPE) -> CALLBACK_TYPE:
        """Listen for value updates."""

        @callback
        def remove_listener() -> None:
            """Remove update listener."""
            self._listeners.pop(remove_listener, None)

        self._listeners[remove_listener] = update_callback
        return remove_listener

    @callback
    def _async_set_values(self, values: dict[Capability, Any]) -> None:
        """Store values for declared capabilities and notify listeners."""
        for capability, value in values.items():
            if capability in self.capabilities:
                self.values[capability] = value
        for update_callback in list(self._listeners.values()):
            update_callback()


class RingSensor(RingLocalDevice):
    """Contact, motion or flood sensor."""

    def __init__(self, descriptor: DeviceDescriptor, device: RingDevice) -> None:
        """Initialize the sensor and subscribe to its telemetry."""
        super().__init__(descriptor)
        self.device = device
        self._async_update_state(device.data)
        device.subscribe_data(self._async_update_state)

    @callback
    def _async_update_state(self, data: RingDeviceData) -> None:
        self._async_set_values(
            {
                capability: read(data)
                for capability, read in SENSOR_VALUES.items()
                if capability in self.capabilities
            }
        )


class RingLock(RingLocalDevice):
    """Smart lock."""

    def __init__(self, descriptor: DeviceDescriptor, device: RingDevice) -> None:
        """Initialize the lock and subscribe to its telemetry."""
        super().__init__(descriptor)
        self.device = device
        self._async_update_state(device.data)
        device.subscribe_data(self._async_update_state)

    @callback
    def _async_update_state(self, data: RingDeviceData) -> None:
        self._async_set_values(
            {
                capability: read(data)
                for capability, read in LOCK_VALUES.items()
                if capability in self.capabilities
            }
        )

    async def async_lock(self) -> None:
        """Lock the device."""
        await self.device.async_send_command(COMMAND_LOCK)

    async def async_unlock(self) -> None:
        """Unlock the device."""
        await self.device.async_send_command(COMMAND_UNLOCK)


class RingCameraDevice(RingLocalDevice):
    """Camera or doorbell.

    Streaming is not handled here, only motion, ding and battery.
    """

    def __init__(self, descriptor: DeviceDescriptor, camera: RingCamera) -> None:
        """Initialize the camera and subscribe to its events."""
        super().__init__(descriptor)
        self.camera = camera
        self._async_set_values(
            {
                Capability.MOTION_SENSOR: False,
                Capability.BINARY_SENSOR: False,
                Capability.BATTERY: camera.battery_level,
            }
        )
        camera.subscribe_motion(self._async_motion)
        if Capability.BINARY_SENSOR in self.capabilities:
            camera.subscribe_ding(self._async_ding)

    @callback
    def _async_motion(self, detected: bool) -> None:
        _LOGGER.debug("Motion %s on %s", detected, self.native_id)
        self._async_set_values(
            {
                Capability.MOTION_SENSOR: detected,
                Capability.BATTERY: self.camera.battery_level,
            }
        )

    @callback
    def _async_ding(self, pressed: bool) -> None:
        _LOGGER.debug("Ding %s on %s", pressed, self.native_id)
        self._async_set_values({Capability.BINARY_SENSOR: pressed})
