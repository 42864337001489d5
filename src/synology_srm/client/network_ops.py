"""Read-only network status and device inventory operations.

Each function builds the form fields the SRM web UI sends and delegates to
:class:`~synology_srm.client.session.SRMSession` for dispatch.

Request shapes (all POST /webapi/entry.cgi):

    WAN STATUS:   method=get&version=1&api=SYNO.Core.Network.Router.ConnectionStatus
    TRAFFIC:      method=get&version=1&mode=net&interval=<live|day|week|month>
                  &api=SYNO.Core.NGFW.Traffic
    UTILIZATION:  method=get&version=1&resource=["network"]&api=SYNO.Core.System.Utilization
    DEVICES:      method=get&version=5&conntype=<all|wireless>&api=SYNO.Core.Network.NSM.Device
                  [&info=<basic|online>]
                  → {"devices": [...]}
    MESH NODES:   method=get&version=4&api=SYNO.Mesh.Node.List
                  → {"nodes": [...]}
"""

from __future__ import annotations

import logging

from synology_srm.client.errors import SRMParseError, SRMValidationError
from synology_srm.client.session import SRMSession, payload_field
from synology_srm.model.device import Device, MeshNode
from synology_srm.model.network import (
    DeviceTraffic,
    NetworkUtilizationList,
    WanConnection,
)
from synology_srm.utils.form import json_param
from synology_srm.vendor.srm.endpoints import (
    API_CONNECTION_STATUS,
    API_DEVICE,
    API_MESH_NODE_LIST,
    API_TRAFFIC,
    API_UTILIZATION,
    ENTRY,
)
from synology_srm.vendor.srm.mappings import TRAFFIC_INTERVALS

logger = logging.getLogger(__name__)

# conn_status value reported for a working uplink.
_CONN_STATUS_NORMAL: str = "normal"


def get_wan_connection_status(session: SRMSession) -> WanConnection:
    """Return the IPv4 and IPv6 WAN connection state."""
    data = {
        "method": "get",
        "version": 1,
        "api": API_CONNECTION_STATUS,
    }
    result: WanConnection = session.request(ENTRY, data)
    return result


def get_wan_status(session: SRMSession) -> bool:
    """Return ``True`` if either the IPv4 or the IPv6 uplink is up."""
    status = get_wan_connection_status(session)
    if not isinstance(status, dict):
        raise SRMParseError(f"Invalid response from {API_CONNECTION_STATUS}")
    return any(
        (status.get(family) or {}).get("conn_status") == _CONN_STATUS_NORMAL
        for family in ("ipv4", "ipv6")
    )


def get_traffic(session: SRMSession, interval: str = "live") -> list[DeviceTraffic]:
    """Return network traffic per device.

    Args:
        session: Active session.
        interval: Aggregation window, one of ``live``, ``day``, ``week``,
            ``month``.

    Raises:
        SRMValidationError: If *interval* is not supported (no request sent).
    """
    if interval not in TRAFFIC_INTERVALS:
        raise SRMValidationError(
            "interval",
            f"Interval must be in {list(TRAFFIC_INTERVALS)}",
        )
    data = {
        "method": "get",
        "version": 1,
        "mode": "net",
        "interval": interval,
        "api": API_TRAFFIC,
    }
    result: list[DeviceTraffic] = session.request(ENTRY, data)
    return result


def get_network_utilization(session: SRMSession) -> NetworkUtilizationList:
    """Return receive/transmit rates per network interface."""
    data = {
        "method": "get",
        "version": 1,
        "resource": json_param(["network"]),
        "api": API_UTILIZATION,
    }
    result: NetworkUtilizationList = session.request(ENTRY, data)
    return result


def get_devices(
    session: SRMSession,
    info: str | None = None,
    conntype: str = "all",
) -> list[Device]:
    """Return the devices known to the router.

    Args:
        session: Active session.
        info: Level of detail (``basic``, ``online``); omitted when ``None``.
        conntype: Connection type filter (``all`` or ``wireless``).
    """
    data: dict[str, object] = {
        "method": "get",
        "version": 5,
        "conntype": conntype,
        "api": API_DEVICE,
    }
    if info:
        data["info"] = info
    devices: list[Device] = payload_field(
        session.request(ENTRY, data), "devices", API_DEVICE
    )
    logger.debug("Fetched %d device(s) (info=%s conntype=%s)", len(devices), info, conntype)
    return devices


def get_wifi_devices(session: SRMSession) -> list[Device]:
    """Return devices currently connected over Wi-Fi, with rate and signal."""
    return get_devices(session, info="online", conntype="wireless")


def get_mesh_nodes(session: SRMSession) -> list[MeshNode]:
    """Return the mesh Wi-Fi nodes with rate, status and client count."""
    data = {
        "method": "get",
        "version": 4,
        "api": API_MESH_NODE_LIST,
    }
    nodes: list[MeshNode] = payload_field(
        session.request(ENTRY, data), "nodes", API_MESH_NODE_LIST
    )
    return nodes
