"""Typed shapes for QoS rules and Safe Access control groups."""

from __future__ import annotations

from typing import NotRequired, TypedDict


class QosBandwidth(TypedDict):
    """Bandwidth pair; ``download`` in kB, ``upload`` in bytes."""

    download: int
    upload: int


class QosProtocol(TypedDict):
    enable: bool
    guaranteed: QosBandwidth
    maximum: QosBandwidth
    priority: int
    protocolID: int


class QosRule(TypedDict):
    """Per-device QoS rule.

    Attributes:
        deviceID: Device MAC address.
        guaranteed: Guaranteed bandwidth.
        maximum: Bandwidth cap.
        protocollist: Per-protocol overrides; labels come from
            :meth:`~synology_srm.router.SRMClient.protocol_label`.
    """

    deviceID: str
    enable: bool
    guaranteed: QosBandwidth
    maximum: QosBandwidth
    priority: int
    protocollist: list[QosProtocol]
    hostname: NotRequired[str]
    ip_addr: NotRequired[str]
    guaranteed_bw_dl: NotRequired[int]
    guaranteed_bw_ul: NotRequired[int]
    maximum_bw_dl: NotRequired[int]
    maximum_bw_ul: NotRequired[int]


class TimespentDetail(TypedDict):
    """Minutes spent online, split by normal quota and reward time."""

    normal: int
    reward: int


class Timespent(TypedDict):
    has_quota: bool
    quota: int
    total_spent: TimespentDetail


class AccessControlGroup(TypedDict):
    """A Safe Access group of devices sharing one profile.

    Attributes:
        devices: MAC addresses of the member devices.
        online_device_count: Members currently online; only set when online
            status was requested and the device lookup succeeded.
        online: ``True`` if any member is online; set together with
            ``online_device_count``.
    """

    config_group_id: int
    device_count: int
    devices: list[str]
    name: str
    pause: bool
    profile_id: int
    timespent: NotRequired[Timespent]
    online_device_count: NotRequired[int]
    online: NotRequired[bool]
