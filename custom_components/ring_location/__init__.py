"""Integration for Ring locations."""

from __future__ import annotations

import logging

import voluptuous as vol

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant, callback
from homeassistant.exceptions import ConfigEntryError, ConfigEntryNotReady

from .api import RingAccount, RingApiError, RingConnectionError
from .const import CONF_LOCATION_ID, DATA_ACCOUNT, DOMAIN, PLATFORMS
from .location import RingLocationController
from .models import LocationConfig

_LOGGER = logging.getLogger(__name__)


@callback
def async_register_account(hass: HomeAssistant, account: RingAccount) -> None:
    """Register the account client that location entries are served from."""
    hass.data.setdefault(DOMAIN, {})[DATA_ACCOUNT] = account


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Set up a Ring location from a config entry."""
    account: RingAccount | None = hass.data.get(DOMAIN, {}).get(DATA_ACCOUNT)
    if account is None:
        raise ConfigEntryNotReady("No Ring account client has been registered")

    try:
        config = LocationConfig.from_options(entry.options)
    except vol.Invalid as err:
        raise ConfigEntryError(f"Invalid Ring location options: {err}") from err

    location_id = entry.data[CONF_LOCATION_ID]
    try:
        location = await account.async_get_location(location_id)
    except (RingApiError, RingConnectionError) as err:
        raise ConfigEntryNotReady(
            f"Failed to get Ring location {location_id}: {err}"
        ) from err

    controller = RingLocationController(hass, entry, location, config)
    try:
        await controller.async_setup()
    except (RingApiError, RingConnectionError) as err:
        await controller.async_shutdown()
        raise ConfigEntryNotReady(
            f"Failed to discover devices of Ring location {location.name}: {err}"
        ) from err

    # Store the controller for platforms to access
    hass.data[DOMAIN][entry.entry_id] = controller

    await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)

    entry.async_on_unload(entry.add_update_listener(update_listener))

    return True


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Unload a config entry."""
    unload_ok = await hass.config_entries.async_unload_platforms(entry, PLATFORMS)

    if unload_ok:
        controller: RingLocationController = hass.data[DOMAIN].pop(entry.entry_id)
        await controller.async_shutdown()

    return unload_ok


async def update_listener(hass: HomeAssistant, entry: ConfigEntry) -> None:
    """Handle options update."""
    controller: RingLocationController = hass.data[DOMAIN][entry.entry_id]
    try:
        config = LocationConfig.from_options(entry.options)
    except vol.Invalid as err:
        _LOGGER.error("Ignoring invalid Ring location options: %s", err)
        return
    _LOGGER.debug("Options changed for location %s, rediscovering", entry.title)
    await controller.async_update_config(config)
