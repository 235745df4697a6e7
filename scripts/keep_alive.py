"""Ping the service's /keep-alive route so a hosted instance stays warm.

Usage:
  python scripts/keep_alive.py --url https://lucky-draw.example.com --interval 600

Options:
  --count 0     number of pings (0 = forever)
  --timeout 10
"""

from __future__ import annotations

import argparse
import logging
import time
from collections.abc import Sequence

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry


logger = logging.getLogger(__name__)


def _build_http_session(retries: int, backoff_factor: float) -> requests.Session:
    retry = Retry(
        total=retries,
        connect=retries,
        read=retries,
        status=retries,
        backoff_factor=backoff_factor,
        status_forcelist=(429, 500, 502, 503, 504),
        allowed_methods=("GET",),
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry)

    session = requests.Session()
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


def ping(http: requests.Session, base_url: str, timeout_seconds: float) -> bool:
    url = base_url.rstrip("/") + "/keep-alive"
    try:
        resp = http.get(url, timeout=timeout_seconds)
    except requests.RequestException as e:
        logger.warning("Keep-alive failed: %s", e)
        return False

    if resp.status_code != 200:
        logger.warning("Keep-alive returned HTTP %s", resp.status_code)
        return False
    logger.info("Keep-alive ok (%s)", resp.text.strip())
    return True


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Keep the lucky draw service awake")
    parser.add_argument("--url", dest="url", type=str, required=True)
    parser.add_argument("--interval", dest="interval_seconds", type=float, default=600.0)
    parser.add_argument("--count", dest="count", type=int, default=0)
    parser.add_argument("--timeout", dest="timeout_seconds", type=float, default=10.0)
    parser.add_argument("--retries", dest="retries", type=int, default=3)
    parser.add_argument("--backoff", dest="backoff", type=float, default=0.5)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")

    http = _build_http_session(retries=args.retries, backoff_factor=args.backoff)

    sent = 0
    failures = 0
    while args.count <= 0 or sent < args.count:
        if not ping(http, args.url, float(args.timeout_seconds)):
            failures += 1
        sent += 1
        if args.count > 0 and sent >= args.count:
            break
        time.sleep(float(args.interval_seconds))

    return 1 if failures and failures == sent else 0


if __name__ == "__main__":
    raise SystemExit(main())
