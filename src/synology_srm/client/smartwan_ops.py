"""Smart WAN read and write operations.

Request shapes (all POST /webapi/entry.cgi):

    GATEWAYS: api=SYNO.Core.Network.SmartWAN.Gateway&method=list&version=1
              &gatewaytype="ipv4"
              → {"list": [...]}
    GET:      api=SYNO.Core.Network.SmartWAN.General&method=get&version=1
              → {"smartwan_mode": ..., "dw_weight_ratio": ..., ...}
    SET:      api=SYNO.Core.Network.SmartWAN.General&method=set&version=1
              &smartwan_mode=failover&dw_weight_ratio=0&smartwan_ifname_1=wan
              &smartwan_ifname_2=lan1&smartwan_failback=true
              → echoed configuration
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from numbers import Real
from typing import Any

from synology_srm.client.errors import SRMParseError, SRMValidationError
from synology_srm.client.session import SRMSession, payload_field
from synology_srm.model.smartwan import SmartWanConfiguration, SmartWanGateway
from synology_srm.utils.form import json_param
from synology_srm.vendor.srm.endpoints import (
    API_SMARTWAN_GATEWAY,
    API_SMARTWAN_GENERAL,
    ENTRY,
)
from synology_srm.vendor.srm.mappings import (
    SMARTWAN_INTERFACES,
    SMARTWAN_MODES,
    WEIGHT_RATIO_MAX,
    WEIGHT_RATIO_MIN,
)

logger = logging.getLogger(__name__)


def get_smart_wan_gateway(
    session: SRMSession,
    gatewaytype: str = "ipv4",
) -> list[SmartWanGateway]:
    """Return the gateways Smart WAN monitors for *gatewaytype*."""
    data = {
        "api": API_SMARTWAN_GATEWAY,
        "method": "list",
        "version": 1,
        "gatewaytype": json_param(gatewaytype),
    }
    gateways: list[SmartWanGateway] = payload_field(
        session.request(ENTRY, data), "list", API_SMARTWAN_GATEWAY
    )
    return gateways


def get_smart_wan(session: SRMSession) -> SmartWanConfiguration:
    """Return the Smart WAN general configuration."""
    data = {
        "api": API_SMARTWAN_GENERAL,
        "method": "get",
        "version": 1,
    }
    result: SmartWanConfiguration = session.request(ENTRY, data)
    return result


def validate_smart_wan(config: object) -> None:
    """Check a Smart WAN configuration before it is sent.

    Raises:
        SRMValidationError: With ``field`` set to ``config``,
            ``dw_weight_ratio``, ``smartwan_ifname_1``, ``smartwan_ifname_2``
            or ``smartwan_mode``, for the first invalid value found.
    """
    if not isinstance(config, Mapping):
        raise SRMValidationError("config", "Invalid WAN config")
    ratio = config.get("dw_weight_ratio")
    if (
        isinstance(ratio, bool)
        or not isinstance(ratio, Real)
        or not WEIGHT_RATIO_MIN <= ratio <= WEIGHT_RATIO_MAX
    ):
        raise SRMValidationError("dw_weight_ratio")
    for key in ("smartwan_ifname_1", "smartwan_ifname_2"):
        if config.get(key) not in SMARTWAN_INTERFACES:
            raise SRMValidationError(key)
    if config.get("smartwan_mode") not in SMARTWAN_MODES:
        raise SRMValidationError("smartwan_mode")


def set_smart_wan(
    session: SRMSession,
    config: Mapping[str, Any],
) -> SmartWanConfiguration:
    """Validate and apply a Smart WAN configuration.

    Nothing is sent when validation fails.

    Args:
        session: Active session.
        config: Full configuration, e.g. ``{"smartwan_mode": "failover",
            "dw_weight_ratio": 0, "smartwan_ifname_1": "wan",
            "smartwan_ifname_2": "lan1", "smartwan_failback": True}``.

    Returns:
        The configuration echoed by the router.

    Raises:
        SRMValidationError: See :func:`validate_smart_wan`.
    """
    validate_smart_wan(config)
    data: dict[str, object] = {
        "api": API_SMARTWAN_GENERAL,
        "method": "set",
        "version": 1,
    }
    data.update(config)
    logger.debug(
        "Setting Smart WAN: mode=%s %s/%s ratio=%s",
        config["smartwan_mode"],
        config["smartwan_ifname_1"],
        config["smartwan_ifname_2"],
        config["dw_weight_ratio"],
    )
    result: SmartWanConfiguration = session.request(ENTRY, data)
    return result


def switch_smart_wan(session: SRMSession) -> SmartWanConfiguration:
    """Swap the primary and secondary Smart WAN interfaces.

    Reads the current configuration and writes it back with
    ``smartwan_ifname_1`` and ``smartwan_ifname_2`` exchanged.  The two
    requests are not atomic; a concurrent change made in between is
    overwritten.

    Returns:
        The configuration echoed by the router.
    """
    current = get_smart_wan(session)
    if not isinstance(current, dict):
        raise SRMParseError(f"Invalid response from {API_SMARTWAN_GENERAL}")
    updated = dict(current)
    updated["smartwan_ifname_1"], updated["smartwan_ifname_2"] = (
        current.get("smartwan_ifname_2"),
        current.get("smartwan_ifname_1"),
    )
    logger.info(
        "Switching Smart WAN interfaces: %s -> %s",
        current.get("smartwan_ifname_1"),
        updated["smartwan_ifname_1"],
    )
    return set_smart_wan(session, updated)
