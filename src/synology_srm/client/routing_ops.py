"""Policy route and wake-on-LAN operations.

Request shapes (all POST /webapi/entry.cgi):

    ROUTES GET:  method=get&version=1&api=SYNO.Core.Network.Router.PolicyRoute&type=ipv4
                 → {"rules": [...]}
    ROUTES SET:  method=set&version=1&api=SYNO.Core.Network.Router.PolicyRoute&type=ipv4
                 &rules=[...]
    WOL LIST:    api=SYNO.Core.Network.WOL&method=get_devices&version=1
                 &findhost=false&client_list=[]
    WOL ADD:     api=SYNO.Core.Network.WOL&method=add_device&version=1
                 &mac="aa:bb:..."[&host="name"]
    WOL WAKE:    api=SYNO.Core.Network.WOL&method=wake&version=1&mac="aa:bb:..."
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from synology_srm.client.session import SRMSession, payload_field
from synology_srm.model.routing import PolicyRoute, WakeOnLanDevice
from synology_srm.utils.form import json_param
from synology_srm.vendor.srm.endpoints import API_POLICY_ROUTE, API_WOL, ENTRY

logger = logging.getLogger(__name__)

# Only IPv4 policy routing is exposed by SRM.
_ROUTE_TYPE: str = "ipv4"


def get_policy_routes(session: SRMSession) -> list[PolicyRoute]:
    """Return the IPv4 policy routes."""
    data = {
        "method": "get",
        "version": 1,
        "api": API_POLICY_ROUTE,
        "type": _ROUTE_TYPE,
    }
    rules: list[PolicyRoute] = payload_field(
        session.request(ENTRY, data), "rules", API_POLICY_ROUTE
    )
    return rules


def set_policy_routes(session: SRMSession, rules: Sequence[PolicyRoute]) -> None:
    """Replace the IPv4 policy routes.

    The router replaces the whole list, so *rules* must contain every rule
    to keep, not only the changed ones.
    """
    data = {
        "method": "set",
        "version": 1,
        "api": API_POLICY_ROUTE,
        "type": _ROUTE_TYPE,
        "rules": json_param(list(rules)),
    }
    logger.debug("Writing %d policy route(s)", len(rules))
    session.request(ENTRY, data)


def get_wake_on_lan_devices(session: SRMSession) -> list[WakeOnLanDevice]:
    """Return the devices registered for wake-on-LAN."""
    data = {
        "api": API_WOL,
        "method": "get_devices",
        "version": 1,
        "findhost": False,
        "client_list": json_param([]),
    }
    result: list[WakeOnLanDevice] = session.request(ENTRY, data)
    return result


def add_wake_on_lan(session: SRMSession, mac: str, host: str | None = None) -> None:
    """Register *mac* for wake-on-LAN, optionally with a hostname."""
    data: dict[str, object] = {
        "api": API_WOL,
        "method": "add_device",
        "version": 1,
        "mac": json_param(mac),
    }
    if host:
        data["host"] = json_param(host)
    session.request(ENTRY, data)


def wake_on_lan(session: SRMSession, mac: str) -> None:
    """Send a wake-on-LAN magic packet to *mac*."""
    data = {
        "api": API_WOL,
        "method": "wake",
        "version": 1,
        "mac": json_param(mac),
    }
    logger.debug("Waking %s", mac)
    session.request(ENTRY, data)
