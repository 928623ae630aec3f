"""
Create one reservation against the Istanbul Festivali API.

Usage:
    source .env && python scripts/create_reservation.py RESERVATION_ID payload.json

Environment variables:
    ISTANBULFESTIVALI_BASE_URL   - API base URL
    ISTANBULFESTIVALI_USERNAME   - login email
    ISTANBULFESTIVALI_PASSWORD   - password
    ISTANBULFESTIVALI_TIMEOUT    - request timeout in seconds (default: 20)
"""

import json
import logging
import os
import sys

# Make sure project root is on sys.path when run as a script
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from istanbulfestivali.domain.errors import ApiError, IstanbulFestivaliError
from istanbulfestivali.factory import create_client

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-7s  %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
log = logging.getLogger(__name__)


def main(argv: list[str]) -> int:
    if len(argv) != 2:
        print(__doc__, file=sys.stderr)
        return 2

    reservation_id, payload_path = argv
    with open(payload_path, encoding="utf-8") as f:
        payload = json.load(f)

    try:
        client = create_client()
    except KeyError as exc:
        print(f"ERROR: environment variable {exc.args[0]!r} is not set.", file=sys.stderr)
        return 1
    except IstanbulFestivaliError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    if not client.health_check():
        log.warning("Health check failed for %s — trying anyway", client.base_url)

    try:
        result = client.create_reservation(reservation_id, payload)
    except ApiError as exc:
        log.error("Reservation rejected (HTTP %d): %s", exc.status_code, exc)
        return 1
    except IstanbulFestivaliError as exc:
        log.error("Reservation failed: %s", exc)
        return 1

    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
