"""
Simulation Import - Uses Polars to read ROI simulation inputs from CSV files
Each row goes through the metrics engine; results found in the file are ignored
"""
import logging
from pathlib import Path
from typing import List, Optional, Union

import polars as pl
from pydantic import BaseModel

from adcentral.core.errors import MetricsValidationError
from adcentral.models.metrics_schema import MetricsInput
from adcentral.services.roi_service import RoiService

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("investment", "ticket", "conversion_rate")
OPTIONAL_COLUMNS = ("target_revenue", "campaign_id")

class SimulationImportError(Exception):
    """Custom exception for simulation import errors"""
    pass

class RejectedRow(BaseModel):
    """A CSV row that could not be saved"""
    line: int
    field: str
    message: str

class ImportReport(BaseModel):
    """Outcome of a CSV import"""
    saved: int = 0
    rejected: List[RejectedRow] = []

def read_simulation_inputs(csv_path: Union[str, Path]) -> pl.DataFrame:
    """
    Read simulation inputs from CSV

    Args:
        csv_path: File with at least investment, ticket and conversion_rate columns

    Returns:
        DataFrame restricted to the known input columns

    Raises:
        SimulationImportError: If the file is missing or lacks a required column
    """
    path = Path(csv_path)
    if not path.is_file():
        raise SimulationImportError(f"CSV file not found: {path}")

    try:
        lazy_frame = pl.scan_csv(path, infer_schema_length=0)
        columns = lazy_frame.collect_schema().names()
    except pl.exceptions.PolarsError as e:
        raise SimulationImportError(f"Error reading {path}: {str(e)}")

    missing = [name for name in REQUIRED_COLUMNS if name not in columns]
    if missing:
        raise SimulationImportError(f"{path} is missing required columns: {', '.join(missing)}")

    numeric = [name for name in ("investment", "ticket", "conversion_rate", "target_revenue") if name in columns]
    selected = [name for name in REQUIRED_COLUMNS + OPTIONAL_COLUMNS if name in columns]

    return (
        lazy_frame
        .select(selected)
        .with_columns([
            pl.col(name).str.strip_chars().cast(pl.Float64, strict=False)
            for name in numeric
        ])
        .collect()
    )

def import_simulations(csv_path: Union[str, Path], roi_service: RoiService) -> ImportReport:
    """
    Compute and save every simulation listed in a CSV file

    Invalid rows are reported and skipped; valid rows are saved in file order.
    """
    frame = read_simulation_inputs(csv_path)
    report = ImportReport()

    # Line 1 is the header
    for line, row in enumerate(frame.iter_rows(named=True), start=2):
        campaign_id: Optional[str] = row.get("campaign_id") or None
        metrics_input = MetricsInput(
            investment=row["investment"],
            ticket=row["ticket"],
            conversion_rate=row["conversion_rate"],
            target_revenue=row.get("target_revenue"),
            campaign_id=campaign_id.strip() if campaign_id else None,
        )
        try:
            roi_service.calculate_and_save(metrics_input)
            report.saved += 1
        except MetricsValidationError as e:
            report.rejected.append(RejectedRow(line=line, field=e.field, message=str(e)))

    logger.info("Imported %d simulations from %s (%d rejected)", report.saved, csv_path, len(report.rejected))
    return report
