"""QoS rules and Safe Access control groups.

Request shapes (all POST /webapi/entry.cgi):

    QOS:     api=SYNO.Core.NGFW.QoS.Rules&method=get&version=1
             → {"rules": [...]}
    GROUPS:  api=SYNO.SafeAccess.AccessControl.ConfigGroup&method=get&version=1
             &additional=["device","total_timespent"]
             → {"config_groups": [...]}
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from synology_srm.client.errors import SRMError
from synology_srm.client.network_ops import get_devices
from synology_srm.client.session import SRMSession, payload_field
from synology_srm.model.access import AccessControlGroup, QosRule
from synology_srm.model.device import Device
from synology_srm.utils.form import json_param
from synology_srm.vendor.srm.endpoints import (
    API_ACCESS_CONTROL_GROUP,
    API_QOS_RULES,
    ENTRY,
)

logger = logging.getLogger(__name__)

DEFAULT_GROUP_ADDITIONAL: tuple[str, ...] = ("device", "total_timespent")


def get_qos(session: SRMSession) -> list[QosRule]:
    """Return QoS rules per device (guaranteed/maximum bandwidth, protocols)."""
    data = {
        "api": API_QOS_RULES,
        "method": "get",
        "version": 1,
    }
    rules: list[QosRule] = payload_field(
        session.request(ENTRY, data), "rules", API_QOS_RULES
    )
    return rules


def compute_access_control_group_status(
    groups: Sequence[AccessControlGroup],
    devices: Iterable[Device],
) -> None:
    """Set ``online_device_count`` and ``online`` on each group in place.

    A member counts as online when its MAC address belongs to a device whose
    ``is_online`` is ``True``.  Counts are computed for every group before
    any group is modified.
    """
    online_macs = {device["mac"] for device in devices if device.get("is_online") is True}
    counts = [
        sum(1 for mac in group["devices"] if mac in online_macs) for group in groups
    ]
    for group, count in zip(groups, counts):
        group["online_device_count"] = count
        group["online"] = count > 0


def get_access_control_groups(
    session: SRMSession,
    request_online_status: bool = False,
    additional: Sequence[str] = DEFAULT_GROUP_ADDITIONAL,
) -> list[AccessControlGroup]:
    """Return the Safe Access control groups.

    Args:
        session: Active session.
        request_online_status: Also fetch the device list and add
            ``online_device_count``/``online`` to each group.
        additional: Extra information requested for each group.

    Returns:
        The groups.  If the device lookup fails, or the groups or devices
        lack the fields the status is derived from, the failure is logged as
        a warning and the groups are returned without the online fields.
    """
    data = {
        "api": API_ACCESS_CONTROL_GROUP,
        "method": "get",
        "version": 1,
        "additional": json_param(list(additional)),
    }
    groups: list[AccessControlGroup] = payload_field(
        session.request(ENTRY, data), "config_groups", API_ACCESS_CONTROL_GROUP
    )
    if request_online_status:
        try:
            devices = get_devices(session, info="basic")
            compute_access_control_group_status(groups, devices)
        except (SRMError, KeyError, TypeError, AttributeError) as exc:
            logger.warning(
                "Group online status unavailable: %s",
                exc,
                extra={"srm_event": "device_lookup_failed", "error": exc},
            )
    return groups
