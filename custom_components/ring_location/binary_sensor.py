"""Support for Ring contact, motion, flood and doorbell sensors."""

from __future__ import annotations

from homeassistant.components.binary_sensor import (
    BinarySensorDeviceClass,
    BinarySensorEntity,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import EntityCategory
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddConfigEntryEntitiesCallback

from .const import DOMAIN
from .devices import RingLocalDevice
from .entity import RingDeviceEntity, async_setup_device_entities
from .location import RingLocationController
from .models import Capability

# Capability -> (entity name, device class)
BINARY_SENSOR_CAPABILITIES: dict[
    Capability, tuple[str, BinarySensorDeviceClass | None]
] = {
    Capability.ENTRY_SENSOR: ("Contact", BinarySensorDeviceClass.OPENING),
    Capability.MOTION_SENSOR: ("Motion", BinarySensorDeviceClass.MOTION),
    Capability.FLOOD_SENSOR: ("Flood", BinarySensorDeviceClass.MOISTURE),
    Capability.TAMPER_SENSOR: ("Tamper", BinarySensorDeviceClass.TAMPER),
    Capability.BINARY_SENSOR: ("Ding", None),
}


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddConfigEntryEntitiesCallback,
) -> None:
    """Set up Ring binary sensors."""
    controller: RingLocationController = hass.data[DOMAIN][entry.entry_id]

    def _entities(device: RingLocalDevice) -> list[RingDeviceEntity]:
        return [
            RingBinarySensor(device, capability)
            for capability in BINARY_SENSOR_CAPABILITIES
            if capability in device.capabilities
        ]

    async_setup_device_entities(hass, entry, controller, async_add_entities, _entities)


class RingBinarySensor(RingDeviceEntity, BinarySensorEntity):
    """A boolean capability of a Ring device."""

    def __init__(self, device: RingLocalDevice, capability: Capability) -> None:
        """Initialize the binary sensor."""
        super().__init__(device, capability)
        self._attr_name, self._attr_device_class = BINARY_SENSOR_CAPABILITIES[
            capability
        ]
        if capability is Capability.TAMPER_SENSOR:
            self._attr_entity_category = EntityCategory.DIAGNOSTIC

    @property
    def is_on(self) -> bool | None:  # type: ignore[override]
        """Return true if the sensor is tripped."""
        value = self.capability_value
        return None if value is None else bool(value)
