"""Support for Ring smart locks."""

from __future__ import annotations

from typing import Any

from homeassistant.components.lock import LockEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers.entity_platform import AddConfigEntryEntitiesCallback

from .api import RingApiError, RingConnectionError
from .const import DOMAIN
from .devices import RingLocalDevice, RingLock
from .entity import RingDeviceEntity, async_setup_device_entities
from .location import RingLocationController
from .models import Capability


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddConfigEntryEntitiesCallback,
) -> None:
    """Set up Ring locks."""
    controller: RingLocationController = hass.data[DOMAIN][entry.entry_id]

    def _entities(device: RingLocalDevice) -> list[RingDeviceEntity]:
        if not isinstance(device, RingLock):
            return []
        return [RingLockEntity(device, Capability.LOCK)]

    async_setup_device_entities(hass, entry, controller, async_add_entities, _entities)


class RingLockEntity(RingDeviceEntity, LockEntity):
    """Representation of a Ring lock."""

    _attr_name = None
    _device: RingLock

    @property
    def is_locked(self) -> bool | None:  # type: ignore[override]
        """Return true if the lock is locked."""
        value = self.capability_value
        if value is None:
            return None
        return value == "locked"

    @property
    def is_jammed(self) -> bool | None:  # type: ignore[override]
        """Return true if the lock is jammed."""
        value = self.capability_value
        if value is None:
            return None
        return value == "jammed"

    async def async_lock(self, **kwargs: Any) -> None:
        """Lock the device."""
        try:
            await self._device.async_lock()
        except (RingApiError, RingConnectionError) as err:
            raise HomeAssistantError(
                f"Failed to lock {self._device.descriptor.name}: {err}"
            ) from err

    async def async_unlock(self, **kwargs: Any) -> None:
        """Unlock the device."""
        try:
            await self._device.async_unlock()
        except (RingApiError, RingConnectionError) as err:
            raise HomeAssistantError(
                f"Failed to unlock {self._device.descriptor.name}: {err}"
            ) from err
