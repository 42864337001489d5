#!/usr/bin/env python3
"""Smoke-test script: print WAN status, mesh nodes and Wi-Fi devices.

Usage::

    export SRM_URL="https://192.168.1.1:8001"
    export SRM_ACCOUNT="admin"
    export SRM_PASSWORD="your-password"
    export SRM_VERIFY_TLS="false"   # optional, default false
    python examples/get_status.py

Exit codes:
    0 — status retrieved and printed successfully.
    1 — missing environment variable or client error.
"""

from __future__ import annotations

import json
import logging
import os
import sys


def _env(name: str, default: str | None = None) -> str:
    value = os.environ.get(name, default)
    if value is None:
        print(f"ERROR: required environment variable {name!r} is not set.", file=sys.stderr)
        sys.exit(1)
    return value


def main() -> None:
    url = _env("SRM_URL")
    account = _env("SRM_ACCOUNT")
    password = _env("SRM_PASSWORD")
    verify_tls_raw = os.environ.get("SRM_VERIFY_TLS", "false").lower()
    verify_tls = verify_tls_raw not in {"0", "false", "no", "off"}

    logging.basicConfig(level=os.environ.get("SRM_LOG_LEVEL", "WARNING"))

    # Import here so import errors surface after env var check.
    from synology_srm.client.errors import SRMError
    from synology_srm.router import SRMClient

    with SRMClient(url, verify_tls=verify_tls) as srm:
        try:
            srm.authenticate(account, password)
            status = {
                "wan_up": srm.get_wan_status(),
                "wan": srm.get_wan_connection_status(),
                "mesh_nodes": [
                    {"name": n["name"], "status": n["network_status"]}
                    for n in srm.get_mesh_nodes()
                ],
                "wifi_devices": [
                    {"hostname": d["hostname"], "signal": d.get("signalstrength")}
                    for d in srm.get_wifi_devices()
                ],
            }
        except SRMError as exc:
            print(f"ERROR: {exc}", file=sys.stderr)
            sys.exit(1)
        finally:
            if srm.sid is not None:
                try:
                    srm.logout()
                except SRMError as exc:
                    print(f"WARNING: logout failed: {exc}", file=sys.stderr)

    print(json.dumps(status, indent=2))


if __name__ == "__main__":
    main()
