#!/usr/bin/env python3
"""
Post a sample week of trainings to the fitness tracker API and print reports.

Pattern per week (Mon–Sun):
  - Mon: easy run
  - Tue: walk
  - Wed: pool swim
  - Thu: tempo run
  - Fri: walk
  - Sat: long run
  - Sun: rest

Usage examples:
  - Against a local backend:
      python scripts/post_demo_week.py --base-url http://localhost:8000
  - JSON metrics instead of text reports:
      python scripts/post_demo_week.py --base-url http://localhost:8000 --summary
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import List

try:
    import requests  # type: ignore
except Exception as exc:  # pragma: no cover
    print("This script requires the 'requests' package.\nInstall with: pip install requests", file=sys.stderr)
    raise


WEIGHT_KG = 75.0
HEIGHT_CM = 180.0
POOL_LENGTH_M = 25


def demo_week() -> List[dict]:
    """Training payloads for one week, Monday first."""
    return [
        {"training_type": "Бег", "action": 9000, "duration": "00:45:00"},
        {"training_type": "Ходьба", "action": 12000, "duration": "01:40:00", "height": HEIGHT_CM},
        {
            "training_type": "Плавание",
            "action": 2000,
            "duration": "01:00:00",
            "length_pool": POOL_LENGTH_M,
            "count_pool": 60,
        },
        {"training_type": "Бег", "action": 12000, "duration": "00:55:00"},
        {"training_type": "Ходьба", "action": 8000, "duration": "01:10:00", "height": HEIGHT_CM},
        {"training_type": "Бег", "action": 25000, "duration": "02:10:00"},
    ]


def post_json(base_url: str, path: str, payload: dict) -> requests.Response:
    url = f"{base_url.rstrip('/')}/{path.lstrip('/')}"
    r = requests.post(url, json=payload, timeout=15)
    if r.status_code >= 300:
        raise RuntimeError(f"{path} -> HTTP {r.status_code}: {r.text}")
    return r


def main() -> None:
    ap = argparse.ArgumentParser(description="Post a demo week of trainings and print the results")
    ap.add_argument("--base-url", default="http://localhost:8000", help="API base URL")
    ap.add_argument("--summary", action="store_true", help="Print JSON metrics instead of text reports")
    args = ap.parse_args()

    path = "trainings/summary" if args.summary else "trainings/report"
    for training in demo_week():
        payload = {"weight": WEIGHT_KG, **training}
        r = post_json(args.base_url, path, payload)
        if args.summary:
            print(json.dumps(r.json(), ensure_ascii=False))
        else:
            print(r.text)

    print("Demo week posted.")


if __name__ == "__main__":
    main()
