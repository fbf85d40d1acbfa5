"""Config flow for Ring Location integration."""

from __future__ import annotations

import logging
from typing import Any

import voluptuous as vol

from homeassistant.config_entries import ConfigFlow, ConfigFlowResult

from .api import RingAccount, RingApiError, RingConnectionError
from .const import CONF_LOCATION_ID, DATA_ACCOUNT, DOMAIN

_LOGGER = logging.getLogger(__name__)

STEP_USER_DATA_SCHEMA = vol.Schema(
    {
        vol.Required(CONF_LOCATION_ID): str,
    }
)


class RingLocationConfigFlow(ConfigFlow, domain=DOMAIN):
    """Handle a config flow for a Ring location."""

    VERSION = 1

    async def async_step_user(
        self, user_input: dict[str, Any] | None = None
    ) -> ConfigFlowResult:
        """Handle the initial step."""
        account: RingAccount | None = self.hass.data.get(DOMAIN, {}).get(DATA_ACCOUNT)
        if account is None:
            return self.async_abort(reason="no_account")

        errors: dict[str, str] = {}

        if user_input is not None:
            location_id = user_input[CONF_LOCATION_ID]

            await self.async_set_unique_id(location_id)
            self._abort_if_unique_id_configured()

            try:
                location = await account.async_get_location(location_id)
            except RingConnectionError:
                errors["base"] = "cannot_connect"
            except RingApiError:
                errors["base"] = "invalid_location"
            except Exception:  # pylint: disable=broad-except
                _LOGGER.exception("Unexpected exception")
                errors["base"] = "unknown"
            else:
                return self.async_create_entry(title=location.name, data=user_input)

        return self.async_show_form(
            step_id="user",
            data_schema=STEP_USER_DATA_SCHEMA,
            errors=errors,
        )
