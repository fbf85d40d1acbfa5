"""Base entity for Ring location devices."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant, callback
from homeassistant.helpers.dispatcher import async_dispatcher_connect
from homeassistant.helpers.entity import DeviceInfo, Entity
from homeassistant.helpers.entity_platform import AddConfigEntryEntitiesCallback

from .const import DOMAIN, SIGNAL_DEVICES_DISCOVERED
from .devices import RingLocalDevice
from .location import RingLocationController
from .models import Capability


class RingDeviceEntity(Entity):
    """An entity exposing one capability of a local device."""

    _attr_has_entity_name = True
    _attr_should_poll = False

    def __init__(self, device: RingLocalDevice, capability: Capability) -> None:
        """Initialize the entity."""
        self._device = device
        self._capability = capability

        descriptor = device.descriptor
        self._attr_unique_id = f"{descriptor.native_id}-{capability.lower()}"
        self._attr_device_info = DeviceInfo(
            identifiers={(DOMAIN, descriptor.native_id)},
            name=descriptor.name,
            manufacturer=descriptor.info.manufacturer,
            model=descriptor.info.model,
            via_device=(DOMAIN, descriptor.provider_id),
        )

    @property
    def capability_value(self) -> Any:
        """Return the current value of the exposed capability."""
        return self._device.get(self._capability)

    async def async_added_to_hass(self) -> None:
        """Register for device updates."""
        await super().async_added_to_hass()
        self.async_on_remove(self._device.async_add_listener(self.async_write_ha_state))


@callback
def async_setup_device_entities(
    hass: HomeAssistant,
    entry: ConfigEntry,
    controller: RingLocationController,
    async_add_entities: AddConfigEntryEntitiesCallback,
    entity_factory: Callable[[RingLocalDevice], list[RingDeviceEntity]],
) -> None:
    """Add entities for discovered devices, now and after each rediscovery."""
    added: set[str] = set()

    @callback
    def _async_add_new_devices() -> None:
        # Dropped devices lose their entities with their registry device
        added.intersection_update(d.native_id for d in controller.descriptors)
        entities: list[RingDeviceEntity] = []
        for descriptor in controller.descriptors:
            if descriptor.native_id in added:
                continue
            device = controller.get_device(descriptor.native_id)
            if device is None:
                continue
            added.add(descriptor.native_id)
            entities.extend(entity_factory(device))
        if entities:
            async_add_entities(entities)

    _async_add_new_devices()
    entry.async_on_unload(
        async_dispatcher_connect(
            hass,
            SIGNAL_DEVICES_DISCOVERED.format(entry.entry_id),
            _async_add_new_devices,
        )
    )
