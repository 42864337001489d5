#!/usr/bin/env python3
"""Example: enable or disable a Wi-Fi network by SSID (dry-run by default).

Usage::

    # Dry-run — shows which profile and radios would be toggled:
    export SRM_URL="https://192.168.1.1:8001"
    export SRM_ACCOUNT="admin"
    export SRM_PASSWORD="your-password"
    export WIFI_SSID="MyGuest"
    python examples/switch_wifi_radio.py

    # Apply:
    export APPLY=1
    python examples/switch_wifi_radio.py

Environment variables:
    SRM_URL         Router URL with scheme and port (required).
    SRM_ACCOUNT     Login account (required).
    SRM_PASSWORD    Login password (required).
    SRM_VERIFY_TLS  Set to "1" to verify TLS certificates (default: off).
    WIFI_SSID       Network name to toggle (required).
    APPLY           Set to "1" to actually apply the change (default: dry-run).
"""

from __future__ import annotations

import os
import sys

from synology_srm.client.errors import SRMError
from synology_srm.router import SRMClient


def main() -> None:
    missing = [
        name
        for name in ("SRM_URL", "SRM_ACCOUNT", "SRM_PASSWORD", "WIFI_SSID")
        if not os.environ.get(name)
    ]
    if missing:
        print(f"ERROR: missing environment variable(s): {', '.join(missing)}", file=sys.stderr)
        sys.exit(1)

    ssid = os.environ["WIFI_SSID"]
    apply = os.environ.get("APPLY", "0") == "1"
    verify_tls = os.environ.get("SRM_VERIFY_TLS", "0") == "1"

    srm = SRMClient(os.environ["SRM_URL"], verify_tls=verify_tls)
    try:
        srm.authenticate(os.environ["SRM_ACCOUNT"], os.environ["SRM_PASSWORD"])
        for profile in srm.get_wifi_settings():
            for radio in profile["radio_list"]:
                if radio.get("ssid") == ssid:
                    state = "enabled" if radio.get("enable") else "disabled"
                    print(f"profile {profile['id']}: {ssid!r} is {state}")
        if not apply:
            print("Dry-run: set APPLY=1 to toggle.")
            return
        srm.switch_wifi_radio(ssid)
        print(f"Toggled {ssid!r}.")
    except SRMError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)
    finally:
        if srm.sid is not None:
            try:
                srm.logout()
            except SRMError as exc:
                print(f"WARNING: logout failed: {exc}", file=sys.stderr)
        srm.close()


if __name__ == "__main__":
    main()
