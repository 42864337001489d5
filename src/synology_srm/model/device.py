"""Typed shapes for client devices and mesh nodes."""

from __future__ import annotations

from typing import NotRequired, TypedDict


class Device(TypedDict):
    """A device known to the router.

    Only the fields every firmware reports are required; Wi-Fi and mesh
    details are present for wireless clients only.

    Attributes:
        mac: Device MAC address, the key used by access-control groups.
        is_online: Whether the device is currently connected.
        signalstrength: Wi-Fi signal strength in percent.
        max_rate: Maximum Wi-Fi rate in Mbps.
        mesh_node_id: Mesh node the device is attached to (``-1`` if none).
    """

    dev_type: str
    hostname: str
    ip6_addr: str
    ip_addr: str
    is_online: bool
    is_wireless: bool
    mac: str
    band: NotRequired[str]
    connection: NotRequired[str]
    current_rate: NotRequired[int]
    is_baned: NotRequired[bool]
    is_beamforming_on: NotRequired[bool]
    is_guest: NotRequired[bool]
    is_high_qos: NotRequired[bool]
    is_low_qos: NotRequired[bool]
    is_manual_dev_type: NotRequired[bool]
    is_manual_hostname: NotRequired[bool]
    is_qos: NotRequired[bool]
    max_rate: NotRequired[int]
    mesh_node_id: NotRequired[int]
    mesh_node_name: NotRequired[str]
    network: NotRequired[str]
    rate_quality: NotRequired[str]
    signalstrength: NotRequired[int]
    transferRXRate: NotRequired[int]
    transferTXRate: NotRequired[int]
    wifi_network_id: NotRequired[int]
    wifi_profile_name: NotRequired[str]
    wifi_ssid: NotRequired[str]


class MeshNodeCapabilities(TypedDict):
    support_custom_topology: bool
    support_force_ethernet: bool


class MeshNode(TypedDict):
    """A mesh Wi-Fi node.

    Attributes:
        network_status: ``"online"`` in normal operation.
        current_rate_rx: Current receive rate in bytes.
        current_rate_tx: Current transmit rate in bytes.
        parent_node_id: Upstream node in the mesh topology.
    """

    band: str
    blinking: bool
    capability: MeshNodeCapabilities
    connected_devices: int
    current_rate_rx: int
    current_rate_tx: int
    custom_topology_mode: str
    is_dual_band: bool
    is_wireless: bool
    led_mode: str
    name: str
    network_status: str
    node_id: int
    node_status: str
    node_status_msg: str
    parent_node_id: int
    signalstrength: int
