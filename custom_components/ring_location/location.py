"""Controller for a single Ring location."""

from __future__ import annotations

import logging

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.exceptions import ServiceValidationError
from homeassistant.helpers.dispatcher import async_dispatcher_send

from .api import RingCamera, RingDevice, RingLocation
from .classify import classify_camera, classify_device, normalize_device_type
from .const import (
    BYPASS_SENSOR_TYPES,
    LOCK_SUFFIX,
    SENSOR_SUFFIX,
    SIGNAL_DEVICES_DISCOVERED,
)
from .devices import RingCameraDevice, RingLocalDevice, RingLock, RingSensor
from .models import (
    ClassificationSkip,
    DeviceDescriptor,
    LocationConfig,
    NightModeBypass,
    SecuritySystemMode,
)
from .registry import async_replace_devices
from .security import RingSecurityCoordinator

_LOGGER = logging.getLogger(__name__)


class RingLocationController:
    """Discover, cache and arm the devices of a Ring location."""

    def __init__(
        self,
        hass: HomeAssistant,
        entry: ConfigEntry,
        location: RingLocation,
        config: LocationConfig,
    ) -> None:
        """Initialize the controller."""
        self.hass = hass
        self.entry = entry
        self.location = location
        self.config = config
        self.security = RingSecurityCoordinator(hass, entry, location, config)
        self.descriptors: list[DeviceDescriptor] = []
        self._location_devices: dict[str, RingCamera | RingDevice] = {}
        self._descriptors_by_id: dict[str, DeviceDescriptor] = {}
        # Instances live as long as the controller, even if rediscovery drops them
        self._devices: dict[str, RingLocalDevice] = {}

    async def async_setup(self) -> None:
        """Initialize the security state and run a first discovery."""
        await self.security.async_setup()
        await self.async_discover_devices()

    async def async_shutdown(self) -> None:
        """Release the security feeds."""
        await self.security.async_shutdown()

    async def async_update_config(self, config: LocationConfig) -> None:
        """Apply new options and rediscover."""
        self.config = config
        self.security.async_update_config(config)
        await self.async_discover_devices()

    async def async_discover_devices(self) -> list[DeviceDescriptor]:
        """Classify every camera and device and publish the result.

        Raises:
            RingApiError: If the devices cannot be enumerated
            RingConnectionError: If the location cannot be reached

        """
        location_devices: dict[str, RingCamera | RingDevice] = {}
        descriptors: list[DeviceDescriptor] = []

        for camera in self.location.cameras:
            result = classify_camera(camera, self.location.id)
            if self._skipped(result, camera.name, "camera"):
                continue
            descriptors.append(result)
            location_devices[result.native_id] = camera

        for device in await self.location.async_get_devices():
            result = classify_device(device, self.location.id)
            if self._skipped(result, device.name, device.data.device_type):
                continue
            descriptors.append(result)
            location_devices[result.native_id] = device

        self._location_devices = location_devices
        self.descriptors = descriptors
        self._descriptors_by_id = {d.native_id: d for d in descriptors}
        _LOGGER.info(
            "Discovered %s devices at location %s", len(descriptors), self.location.name
        )

        async_replace_devices(self.hass, self.entry, self.location, descriptors)
        async_dispatcher_send(
            self.hass, SIGNAL_DEVICES_DISCOVERED.format(self.entry.entry_id)
        )
        return descriptors

    @staticmethod
    def _skipped(
        result: DeviceDescriptor | ClassificationSkip, name: str, device_type: str
    ) -> bool:
        if isinstance(result, ClassificationSkip):
            _LOGGER.debug(
                "Ignoring '%s' device '%s': %s", device_type, name, result.reason
            )
            return True
        return False

    def get_device(self, native_id: str) -> RingLocalDevice | None:
        """Return the local device for an identifier, creating it on first use."""
        if native_id in self._devices:
            return self._devices[native_id]

        vendor_device = self._location_devices.get(native_id)
        descriptor = self._descriptors_by_id.get(native_id)
        if vendor_device is None or descriptor is None:
            _LOGGER.debug("Device %s is not part of the last discovery", native_id)
            return None

        device: RingLocalDevice
        if native_id.endswith(SENSOR_SUFFIX):
            device = RingSensor(descriptor, vendor_device)  # type: ignore[arg-type]
        elif native_id.endswith(LOCK_SUFFIX):
            device = RingLock(descriptor, vendor_device)  # type: ignore[arg-type]
        else:
            device = RingCameraDevice(descriptor, vendor_device)  # type: ignore[arg-type]
        self._devices[native_id] = device
        return device

    def release_device(self, native_id: str) -> None:
        """Accept a release request; instances persist for the controller lifetime."""

    def bypass_sensor_ids(self) -> list[str]:
        """Return the vendor ids of faulted contact and retrofit zone sensors."""
        bypass: list[str] = []
        for native_id, device in self._location_devices.items():
            if not native_id.endswith(SENSOR_SUFFIX):
                continue
            data = device.data  # type: ignore[union-attr]
            device_type = normalize_device_type(data.device_type)
            if device_type in BYPASS_SENSOR_TYPES and data.faulted:
                bypass.append(str(device.id))
        return bypass

    async def async_arm(self, mode: SecuritySystemMode) -> None:
        """Ask Ring to arm the location.

        The security state follows once the feeds report the change.
        """
        config = self.config
        if mode is SecuritySystemMode.AWAY_ARMED:
            await self.location.async_arm_away()
        elif mode is SecuritySystemMode.HOME_ARMED:
            await self.location.async_arm_home()
        elif mode is SecuritySystemMode.NIGHT_ARMED:
            if not config.night_mode_enabled:
                raise ServiceValidationError(
                    f"Night mode is disabled for location {self.location.name}"
                )
            bypass = self.bypass_sensor_ids()
            _LOGGER.debug("Arming night mode bypassing %s", bypass)
            if config.night_mode_bypass is NightModeBypass.AWAY:
                await self.location.async_arm_away(bypass)
            else:
                await self.location.async_arm_home(bypass)
        elif mode is SecuritySystemMode.DISARMED:
            await self.location.async_disarm()

    async def async_disarm(self) -> None:
        """Ask Ring to disarm the location."""
        await self.location.async_disarm()
