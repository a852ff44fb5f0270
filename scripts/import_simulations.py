"""
Simulation Import Script
Loads ROI simulations from a CSV file into the calculation history

Usage:
    python scripts/import_simulations.py path/to/simulations.csv
"""
import sys
import asyncio
from sys import path
path.append(".")

from adcentral.db.database import create_app_tables, get_record_store
from adcentral.services.roi_service import create_roi_service
from adcentral.services.simulation_import import import_simulations, SimulationImportError

def main() -> None:
    if len(sys.argv) != 2:
        print("Usage: python scripts/import_simulations.py <csv_file>")
        sys.exit(2)

    csv_file = sys.argv[1]

    asyncio.run(create_app_tables())
    roi_service = create_roi_service(get_record_store())

    print(f"📄 Importing simulations from {csv_file}...")
    try:
        report = import_simulations(csv_file, roi_service)
    except SimulationImportError as e:
        print(f"❌ {e}")
        sys.exit(1)

    print(f"   ✅ Saved: {report.saved}")
    if report.rejected:
        print(f"   ⚠️  Rejected: {len(report.rejected)}")
        for row in report.rejected:
            print(f"      - line {row.line}: {row.message}")

if __name__ == "__main__":
    main()
