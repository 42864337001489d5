"""Wi-Fi profile read and write operations.

Request shapes (all POST /webapi/entry.cgi):

    GET:  api=SYNO.Wifi.Network.Setting&method=get&version=1
          → {"profiles": [{"id": 0, "radio_list": [...]}, ...]}
    SET:  api=SYNO.Wifi.Network.Setting&method=set&version=1&profiles=[...]
          Only the profiles included are modified.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from synology_srm.client.errors import SRMNotFoundError, SRMValidationError
from synology_srm.client.session import SRMSession, payload_field
from synology_srm.model.wifi import WifiProfile
from synology_srm.utils.form import json_param
from synology_srm.vendor.srm.endpoints import API_WIFI_SETTING, ENTRY

logger = logging.getLogger(__name__)


def get_wifi_settings(session: SRMSession) -> list[WifiProfile]:
    """Return every Wi-Fi profile with its radio list."""
    data = {
        "api": API_WIFI_SETTING,
        "method": "get",
        "version": 1,
    }
    profiles: list[WifiProfile] = payload_field(
        session.request(ENTRY, data), "profiles", API_WIFI_SETTING
    )
    return profiles


def set_wifi_settings(session: SRMSession, profiles: Sequence[WifiProfile]) -> None:
    """Write back the given Wi-Fi profiles."""
    data = {
        "api": API_WIFI_SETTING,
        "method": "set",
        "version": 1,
        "profiles": json_param(list(profiles)),
    }
    logger.debug("Writing %d Wi-Fi profile(s)", len(profiles))
    session.request(ENTRY, data)


def switch_wifi_radio(session: SRMSession, ssid: str | None) -> None:
    """Enable or disable the radios broadcasting *ssid*.

    The first profile holding a radio with that SSID is selected; every
    radio with that SSID in it has ``enable`` flipped and only that profile
    is written back.

    Raises:
        SRMValidationError: If *ssid* is empty (no request sent).
        SRMNotFoundError: If no profile has a radio with that SSID.
    """
    if not ssid:
        raise SRMValidationError("ssid", "You must provide the network SSID")
    profiles = get_wifi_settings(session)
    profile = next(
        (
            p
            for p in profiles
            if any(radio.get("ssid") == ssid for radio in p.get("radio_list", []))
        ),
        None,
    )
    if profile is None:
        raise SRMNotFoundError("The SSID provided was not found")
    for radio in profile["radio_list"]:
        if radio.get("ssid") == ssid:
            radio["enable"] = not radio.get("enable")
            logger.info(
                "Wi-Fi radio %r in profile %s -> %s",
                ssid,
                profile.get("id"),
                "enabled" if radio["enable"] else "disabled",
            )
    set_wifi_settings(session, [profile])
