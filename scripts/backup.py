"""Backup the shift entries CSV.

Copies ENTRIES_CSV_PATH into ./backups with a timestamp suffix.
"""

from __future__ import annotations

import importlib
import shutil
from datetime import datetime
from pathlib import Path

from config import get_settings_module


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    src = Path(getattr(settings, "ENTRIES_CSV_PATH", "") or "")
    if not src.name or not src.exists():
        raise SystemExit(f"No entries file to back up (ENTRIES_CSV_PATH={str(src)!r})")

    out_dir = Path(__file__).resolve().parents[1] / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"{src.stem}_{ts}{src.suffix}"
    shutil.copy2(src, out_file)
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
