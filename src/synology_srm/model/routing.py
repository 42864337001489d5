"""Typed shapes for policy routes and wake-on-LAN entries."""

from __future__ import annotations

from typing import NotRequired, TypedDict


class PolicyRoute(TypedDict):
    """An IPv4 policy route.

    Attributes:
        active: ``"Enabled"`` or ``"Disabled"`` as shown in the UI.
        enable: Whether the rule is applied.
    """

    active: str
    displayname: str
    dst_subnet: str
    enable: bool
    gateway: str
    ifname: str
    src_subnet: str


class WakeOnLanDevice(TypedDict):
    dsm_version: int
    mac: str
    status: str
    support_wol: bool
    host: NotRequired[str]
