"""Export and import of blood pressure records.

CSV is the interchange format for record files; HTML produces a printable
report table.
"""

from __future__ import annotations

import html
import logging
from collections.abc import Iterable
from datetime import date
from pathlib import Path

import pandas as pd

from src.models import SESSIONS, BloodPressureReading

logger = logging.getLogger(__name__)

COLUMNS = ["timestamp", "systolic", "diastolic", "heart_rate", "category", "session", "note"]
REQUIRED_COLUMNS = ["timestamp", "systolic", "diastolic", "heart_rate"]

REPORT_TEMPLATE = """<html>
  <head>
    <meta charset="utf-8">
    <title>{title}</title>
    <style>
      table {{ width: 100%; border-collapse: collapse; }}
      th, td {{ border: 1px solid #ddd; padding: 8px; text-align: left; }}
      th {{ background-color: #7F3DFF; color: white; }}
    </style>
  </head>
  <body>
    <h1>{title}</h1>
    {table}
  </body>
</html>
"""


def readings_to_dataframe(readings: Iterable[BloodPressureReading]) -> pd.DataFrame:
    """Build a table of readings, one row per reading."""
    rows = [
        {
            "timestamp": r.timestamp,
            "systolic": r.systolic,
            "diastolic": r.diastolic,
            "heart_rate": r.heart_rate,
            "category": r.category,
            "session": r.session,
            "note": r.note,
        }
        for r in readings
    ]
    return pd.DataFrame(rows, columns=COLUMNS)


def default_export_name(extension: str, today: date | None = None) -> str:
    """File name for an export, e.g. blood_pressure_20250115.csv."""
    today = today or date.today()
    return f"blood_pressure_{today.strftime('%Y%m%d')}.{extension}"


def export_csv(readings: Iterable[BloodPressureReading], path: str | Path) -> Path:
    """Write readings to a CSV file.

    Args:
        readings: Readings to export
        path: Output file path (parent directories are created)

    Returns:
        Path of the written file
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    df = readings_to_dataframe(readings)
    df.to_csv(path, index=False)
    logger.info(f"Exported {len(df)} records to {path}")
    return path


def export_html(
    readings: Iterable[BloodPressureReading],
    path: str | Path,
    title: str = "Blood Pressure Report",
) -> Path:
    """Write readings as an HTML report table.

    Returns:
        Path of the written file
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    df = readings_to_dataframe(readings)
    df["timestamp"] = df["timestamp"].map(lambda ts: ts.strftime("%Y-%m-%d %H:%M"))
    table = df.fillna("").to_html(index=False, border=0)

    path.write_text(
        REPORT_TEMPLATE.format(title=html.escape(title), table=table),
        encoding="utf-8",
    )
    logger.info(f"Exported {len(df)} records to {path}")
    return path


def load_csv(path: str | Path) -> list[BloodPressureReading]:
    """Read readings from a CSV file written by export_csv.

    Extra columns (e.g. category) are ignored; category is always derived.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If a required column is missing
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Records file not found: {path}")

    # Read every column as text: numeric-looking notes stay as written and
    # timestamps keep their own UTC offsets
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Missing columns in {path}: {', '.join(missing)}")

    readings = [
        BloodPressureReading(
            timestamp=pd.Timestamp(row["timestamp"]).to_pydatetime(),
            systolic=int(row["systolic"]),
            diastolic=int(row["diastolic"]),
            heart_rate=int(row["heart_rate"]),
            note=_optional_str(row.get("note")),
            session=_session(row.get("session")),
        )
        for row in df.to_dict("records")
    ]
    logger.info(f"Loaded {len(readings)} records from {path}")
    return readings


def _optional_str(value) -> str | None:
    if value is None or pd.isna(value):
        return None
    text = str(value).strip()
    return text or None


def _session(value):
    text = _optional_str(value)
    return text if text in SESSIONS else None
