"""Synology SRM client — top-level facade over the session and operations."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from synology_srm.client import (
    access_ops,
    network_ops,
    routing_ops,
    smartwan_ops,
    wifi_ops,
)
from synology_srm.client.session import SRMSession
from synology_srm.model.access import AccessControlGroup, QosRule
from synology_srm.model.config import DEFAULT_TIMEOUT_S, SRMClientConfig
from synology_srm.model.device import Device, MeshNode
from synology_srm.model.network import (
    DeviceTraffic,
    NetworkUtilizationList,
    WanConnection,
)
from synology_srm.model.routing import PolicyRoute, WakeOnLanDevice
from synology_srm.model.smartwan import SmartWanConfiguration, SmartWanGateway
from synology_srm.model.wifi import WifiProfile
from synology_srm.vendor.srm.mappings import PROTOCOL_LABELS, UNKNOWN_PROTOCOL_LABEL

logger = logging.getLogger(__name__)


class SRMClient:
    """Client for the Synology Router Manager web API.

    Every method issues one request (two for the read-then-write helpers)
    and returns the router's JSON payload as plain dicts and lists.

    Args:
        base_url: Router URL with scheme and port, e.g.
            ``https://192.168.1.1:8001``.
        sid: Session identifier from a previous :meth:`authenticate`.
        timeout_s: Per-request timeout in seconds (default 5).
        verify_tls: Verify the router's TLS certificate (default ``False``).
        headers: Extra headers sent with every request.
        transport_options: Extra keyword arguments for :mod:`requests`.
        error_labels: Error-code table overriding the built-in one.
        protocol_labels: Protocol-id table overriding the built-in one.

    Raises:
        SRMConfigError: If *base_url* is missing or not an http(s) URL.

    Example::

        with SRMClient("https://192.168.1.1:8001") as srm:
            srm.authenticate("admin", "secret")
            for device in srm.get_wifi_devices():
                print(device["hostname"], device.get("signalstrength"))
    """

    def __init__(
        self,
        base_url: str,
        sid: str | None = None,
        *,
        timeout_s: float = DEFAULT_TIMEOUT_S,
        verify_tls: bool = False,
        headers: Mapping[str, str] | None = None,
        transport_options: Mapping[str, Any] | None = None,
        error_labels: Mapping[int, str] | None = None,
        protocol_labels: Mapping[int, str] | None = None,
    ) -> None:
        self.config = SRMClientConfig(
            base_url=base_url,
            timeout_s=timeout_s,
            verify_tls=verify_tls,
            headers=dict(headers or {}),
            transport_options=dict(transport_options or {}),
        )
        self._session: SRMSession = SRMSession(
            self.config, sid=sid, error_labels=error_labels
        )
        self._protocol_labels: Mapping[int, str] = (
            PROTOCOL_LABELS if protocol_labels is None else protocol_labels
        )
        logger.debug(
            "SRMClient initialised: url=%s timeout=%.1fs verify_tls=%s",
            self._session.base_url,
            timeout_s,
            verify_tls,
        )

    # ------------------------------------------------------------------
    # Session lifecycle
    # ------------------------------------------------------------------

    @property
    def sid(self) -> str | None:
        """Current session identifier, or ``None``."""
        return self._session.sid

    @property
    def base_url(self) -> str:
        """Normalised router base URL."""
        return self._session.base_url

    def authenticate(self, account: str | None, password: str | None) -> str:
        """Log in and return the session identifier (also kept by the client)."""
        return self._session.authenticate(account, password)

    def logout(self) -> None:
        """Destroy the session; the identifier is cleared even on failure."""
        self._session.logout()

    def close(self) -> None:
        """Release the HTTP connection.  Does not log out."""
        self._session.close()

    def __enter__(self) -> SRMClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def request(self, path: str, data: Mapping[str, object] | None = None) -> Any:
        """Low-level call: POST *data* to *path* and return the unwrapped payload."""
        return self._session.request(path, data)

    def protocol_label(self, protocol_id: int) -> str:
        """Return the label of an NGFW protocol id, or ``"Unknown"``."""
        return self._protocol_labels.get(protocol_id, UNKNOWN_PROTOCOL_LABEL)

    # ------------------------------------------------------------------
    # Network status and devices
    # ------------------------------------------------------------------

    def get_wan_connection_status(self) -> WanConnection:
        """Return the IPv4/IPv6 WAN connection (status, IP, interface)."""
        return network_ops.get_wan_connection_status(self._session)

    def get_wan_status(self) -> bool:
        """Return ``True`` if the IPv4 or IPv6 WAN connection is normal."""
        return network_ops.get_wan_status(self._session)

    def get_traffic(self, interval: str = "live") -> list[DeviceTraffic]:
        """Return traffic per device for ``live``, ``day``, ``week`` or ``month``."""
        return network_ops.get_traffic(self._session, interval)

    def get_network_utilization(self) -> NetworkUtilizationList:
        """Return the network interface utilization samples."""
        return network_ops.get_network_utilization(self._session)

    def get_devices(self, info: str | None = None, conntype: str = "all") -> list[Device]:
        """Return known devices; see :func:`.network_ops.get_devices`."""
        return network_ops.get_devices(self._session, info, conntype)

    def get_wifi_devices(self) -> list[Device]:
        """Return the devices currently online over Wi-Fi."""
        return network_ops.get_wifi_devices(self._session)

    def get_mesh_nodes(self) -> list[MeshNode]:
        """Return the mesh nodes with their status and capabilities."""
        return network_ops.get_mesh_nodes(self._session)

    # ------------------------------------------------------------------
    # Smart WAN
    # ------------------------------------------------------------------

    def get_smart_wan_gateway(self, gatewaytype: str = "ipv4") -> list[SmartWanGateway]:
        """Return the gateways Smart WAN monitors for *gatewaytype*."""
        return smartwan_ops.get_smart_wan_gateway(self._session, gatewaytype)

    def get_smart_wan(self) -> SmartWanConfiguration:
        """Return the Smart WAN general configuration."""
        return smartwan_ops.get_smart_wan(self._session)

    def set_smart_wan(self, config: Mapping[str, Any]) -> SmartWanConfiguration:
        """Validate and apply *config*; see :func:`.smartwan_ops.set_smart_wan`."""
        return smartwan_ops.set_smart_wan(self._session, config)

    def switch_smart_wan(self) -> SmartWanConfiguration:
        """Swap the two Smart WAN interfaces and return the new configuration."""
        return smartwan_ops.switch_smart_wan(self._session)

    # ------------------------------------------------------------------
    # Routing and wake on LAN
    # ------------------------------------------------------------------

    def get_policy_routes(self) -> list[PolicyRoute]:
        """Return the IPv4 policy routes."""
        return routing_ops.get_policy_routes(self._session)

    def set_policy_routes(self, rules: Sequence[PolicyRoute]) -> None:
        """Replace all IPv4 policy routes with *rules*."""
        routing_ops.set_policy_routes(self._session, rules)

    def get_wake_on_lan_devices(self) -> list[WakeOnLanDevice]:
        """Return the devices registered for wake on LAN."""
        return routing_ops.get_wake_on_lan_devices(self._session)

    def add_wake_on_lan(self, mac: str, host: str | None = None) -> None:
        """Register *mac* (optionally named *host*) for wake on LAN."""
        routing_ops.add_wake_on_lan(self._session, mac, host)

    def wake_on_lan(self, mac: str) -> None:
        """Send a wake-on-LAN packet to *mac*."""
        routing_ops.wake_on_lan(self._session, mac)

    # ------------------------------------------------------------------
    # QoS and access control
    # ------------------------------------------------------------------

    def get_qos(self) -> list[QosRule]:
        """Return the QoS rules per device."""
        return access_ops.get_qos(self._session)

    def get_access_control_groups(
        self,
        request_online_status: bool = False,
        additional: Sequence[str] = access_ops.DEFAULT_GROUP_ADDITIONAL,
    ) -> list[AccessControlGroup]:
        """Return Safe Access groups, optionally with their online status.

        A failed device lookup is logged and the groups are returned without
        the online fields.
        """
        return access_ops.get_access_control_groups(
            self._session, request_online_status, additional
        )

    @staticmethod
    def compute_access_control_group_status(
        groups: Sequence[AccessControlGroup],
        devices: Iterable[Device],
    ) -> None:
        """Set ``online_device_count`` and ``online`` on each group in place."""
        access_ops.compute_access_control_group_status(groups, devices)

    # ------------------------------------------------------------------
    # Wi-Fi
    # ------------------------------------------------------------------

    def get_wifi_settings(self) -> list[WifiProfile]:
        """Return the Wi-Fi profiles with their radios."""
        return wifi_ops.get_wifi_settings(self._session)

    def set_wifi_settings(self, profiles: Sequence[WifiProfile]) -> None:
        """Write back the given Wi-Fi *profiles*."""
        wifi_ops.set_wifi_settings(self._session, profiles)

    def switch_wifi_radio(self, ssid: str | None) -> None:
        """Toggle the radios broadcasting *ssid* in the first profile holding it."""
        wifi_ops.switch_wifi_radio(self._session, ssid)
