"""
CSV export of scraped job records.
"""

import csv
import logging
from pathlib import Path
from typing import List, Sequence, Union

from jobscraper.core.models import JobRecord

logger = logging.getLogger(__name__)


def export_csv(records: Sequence[JobRecord], path: Union[str, Path]) -> Path:
    """
    Write *records* to *path* as UTF-8 CSV with a header row, overwriting
    any existing file. Column order follows the first record's fields.

    Raises:
        ValueError: if there is nothing to export.
        OSError: if the file cannot be written.
    """
    if not records:
        raise ValueError("No job records to export; refusing to write an empty CSV.")

    path = Path(path)
    fieldnames = list(records[0].to_dict().keys())

    with path.open("w", newline="", encoding="utf-8") as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=fieldnames)
        writer.writeheader()
        for record in records:
            writer.writerow(record.to_dict())

    logger.info(f"Saved {len(records)} jobs to {path}")
    return path


def read_csv(path: Union[str, Path]) -> List[JobRecord]:
    """
    Load records previously written by export_csv.
    """
    with Path(path).open(newline="", encoding="utf-8") as csvfile:
        reader = csv.DictReader(csvfile, restval="")
        return [JobRecord(**row) for row in reader]
