"""Typed shapes for Smart WAN gateways and configuration."""

from __future__ import annotations

from typing import TypedDict


class SmartWanGateway(TypedDict):
    """An uplink gateway monitored by Smart WAN.

    Attributes:
        gatewayip: Upstream address (the ISP modem, for example).
        ifname: Kernel interface name such as ``eth0``.
        netstatus: ``"enabled"`` or ``"disabled"``.
    """

    displayname: str
    enable_priority_check: bool
    failed_site_name: str
    failed_site_num: int
    gatewayip: str
    ifname: str
    netstatus: str
    ping_failed_cnt: int
    ping_succ_cnt: int


class SmartWanConfiguration(TypedDict):
    """Smart WAN general settings.

    Attributes:
        dw_weight_ratio: Load-balancing weight of the first interface (0-100).
        smartwan_ifname_1: Primary interface (``wan``, ``lan1``, ...).
        smartwan_ifname_2: Secondary interface.
        smartwan_mode: ``failover`` or ``loadbalancing_failover``.
        smartwan_failback: Return to the primary once it recovers.
    """

    dw_weight_ratio: int
    smartwan_failback: bool
    smartwan_ifname_1: str
    smartwan_ifname_2: str
    smartwan_mode: str
