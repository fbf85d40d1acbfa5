"""Support for Ring battery levels."""

from __future__ import annotations

from homeassistant.components.sensor import (
    SensorDeviceClass,
    SensorEntity,
    SensorStateClass,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import PERCENTAGE, EntityCategory
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddConfigEntryEntitiesCallback

from .const import DOMAIN
from .devices import RingLocalDevice
from .entity import RingDeviceEntity, async_setup_device_entities
from .location import RingLocationController
from .models import Capability


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddConfigEntryEntitiesCallback,
) -> None:
    """Set up Ring battery sensors."""
    controller: RingLocationController = hass.data[DOMAIN][entry.entry_id]

    def _entities(device: RingLocalDevice) -> list[RingDeviceEntity]:
        if Capability.BATTERY not in device.capabilities:
            return []
        return [RingBatterySensor(device, Capability.BATTERY)]

    async_setup_device_entities(hass, entry, controller, async_add_entities, _entities)


class RingBatterySensor(RingDeviceEntity, SensorEntity):
    """Battery level of a Ring device."""

    _attr_name = "Battery"
    _attr_device_class = SensorDeviceClass.BATTERY
    _attr_state_class = SensorStateClass.MEASUREMENT
    _attr_native_unit_of_measurement = PERCENTAGE
    _attr_entity_category = EntityCategory.DIAGNOSTIC

    @property
    def native_value(self) -> int | None:  # type: ignore[override]
        """Return the battery level."""
        return self.capability_value
