"""Dump a fleet overview (statistics, chart series, due maintenance) as JSON."""

import asyncio
import json
import sys
from pathlib import Path

# Ensure project root is on path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from fleet.app import build_store, configure_logging
from fleet.config import StoreSettings
from fleet.contracts import chart_series

OUTPUT_PATH = Path(__file__).resolve().parent / "fleet_report.json"


async def collect(settings: StoreSettings) -> dict:
    store = await build_store(settings)

    stats = await store.get_fleet_statistics()
    by_status = await store.get_aircraft_count_by_status()
    by_manufacturer = await store.get_aircraft_count_by_manufacturer()
    upcoming = await store.get_upcoming_maintenance()

    return {
        "statistics": stats.model_dump(mode="json"),
        "status_chart": [p.model_dump() for p in chart_series(by_status)],
        "manufacturer_chart": [p.model_dump() for p in chart_series(by_manufacturer)],
        "upcoming_maintenance": [
            {
                "id": a.id,
                "registrationNumber": a.registration_number,
                "nextMaintenanceDate": a.next_maintenance_date.isoformat(),
            }
            for a in upcoming
        ],
    }


def main():
    settings = StoreSettings.from_env()
    configure_logging(settings.log_level)

    output = asyncio.run(collect(settings))

    OUTPUT_PATH.write_text(
        json.dumps(output, indent=2, ensure_ascii=False),
        encoding="utf-8",
    )
    print(f"Written: {OUTPUT_PATH} ({OUTPUT_PATH.stat().st_size:,} bytes)")


if __name__ == "__main__":
    main()
