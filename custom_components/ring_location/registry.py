"""Publish discovered devices to the Home Assistant device registry."""

from __future__ import annotations

from collections.abc import Iterable
import logging

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant, callback
from homeassistant.helpers import device_registry as dr

from .api import RingLocation
from .const import DOMAIN, MANUFACTURER
from .models import DeviceDescriptor

_LOGGER = logging.getLogger(__name__)


@callback
def async_replace_devices(
    hass: HomeAssistant,
    entry: ConfigEntry,
    location: RingLocation,
    descriptors: Iterable[DeviceDescriptor],
) -> None:
    """Replace the registry devices of a location with the given descriptors."""
    device_registry = dr.async_get(hass)

    location_device = device_registry.async_get_or_create(
        config_entry_id=entry.entry_id,
        identifiers={(DOMAIN, location.id)},
        name=location.name,
        manufacturer=MANUFACTURER,
        model="Location",
    )
    current = {location_device.id}

    for descriptor in descriptors:
        device = device_registry.async_get_or_create(
            config_entry_id=entry.entry_id,
            identifiers={(DOMAIN, descriptor.native_id)},
            name=descriptor.name,
            manufacturer=descriptor.info.manufacturer,
            model=descriptor.info.model,
            sw_version=descriptor.info.firmware,
            serial_number=descriptor.info.serial_number,
            via_device=(DOMAIN, location.id),
        )
        current.add(device.id)

    for device in dr.async_entries_for_config_entry(device_registry, entry.entry_id):
        if device.id not in current:
            _LOGGER.debug("Removing stale device %s", device.name)
            device_registry.async_update_device(
                device.id, remove_config_entry_id=entry.entry_id
            )
