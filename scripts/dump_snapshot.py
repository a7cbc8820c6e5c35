"""Save the raw sheets payload to a JSON file.

Note: Useful to reproduce a parsing problem offline, since nothing is stored
between refreshes. Replay the file with examples/example_usage.py.
"""

from __future__ import annotations

import importlib
import json
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from attendance_dashboard.core.exceptions import DomainError
from attendance_dashboard.sheets.client import SheetsClient, SheetsConfig


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    cfg = settings.SHEETS_CONFIG

    client = SheetsClient(SheetsConfig(url=cfg["url"], timeout_seconds=float(cfg["timeout_seconds"])))
    try:
        payload = client.fetch_payload()
    except DomainError as e:
        raise SystemExit(f"Fetch failed: {e}")

    out_dir = REPO_ROOT / "snapshots"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"sheets_{ts}.json"
    out_file.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"OK: Snapshot saved: {out_file}")


if __name__ == "__main__":
    main()
