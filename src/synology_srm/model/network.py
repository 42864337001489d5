"""Typed shapes for WAN status, traffic and utilization payloads."""

from __future__ import annotations

from typing import NotRequired, TypedDict


class IpWanConnection(TypedDict):
    """WAN connection state for one address family.

    Attributes:
        conn_status: ``"normal"`` when connected, ``"not available"`` otherwise.
        ifname: Interface carrying the connection.
        ip: External IP address.
        pppoe: Whether the link is PPPoE.
    """

    conn_status: str
    ifname: str
    ip: str
    pppoe: bool
    vpn_profile: NotRequired[str]


class WanConnection(TypedDict):
    ipv4: IpWanConnection
    ipv6: IpWanConnection


class RecordProtocol(TypedDict):
    """Traffic of one protocol inside a record period (bytes and packets)."""

    download: int
    download_packets: int
    protocol: int
    upload: int
    upload_packets: int


class TrafficRecord(TypedDict):
    download: int
    download_packets: int
    protocollist: list[RecordProtocol]
    time: int
    upload: int
    upload_packets: int


class DeviceTraffic(TypedDict):
    """Traffic totals for one device.

    Attributes:
        deviceID: Device MAC address.
        recs: Per-period records.
        timeStart: Timestamp of the first record, when reported.
        timeEnd: Timestamp of the last record, when reported.
    """

    deviceID: str
    download: int
    download_packets: int
    recs: list[TrafficRecord]
    upload: int
    upload_packets: int
    timeStart: NotRequired[int]
    timeEnd: NotRequired[int]
    timezone: NotRequired[int]


class NetworkUtilization(TypedDict):
    """Receive/transmit rate of one interface, in bytes."""

    device: str
    rx: int
    tx: int


class NetworkUtilizationList(TypedDict):
    network: list[NetworkUtilization]
    time: int
