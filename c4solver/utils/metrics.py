"""CSV logging of solve runs."""

from collections import defaultdict
import csv
import os
from typing import Any, Dict, List


class MetricsLogger:
    """Appends one CSV row per solve run to ``<log_dir>/solve_metrics.csv``."""

    FILENAME = "solve_metrics.csv"

    def __init__(self, log_dir: str = "data/logs"):
        """
        Initialize metrics logger.

        Args:
            log_dir: Directory to save logs
        """
        self.log_dir = log_dir
        os.makedirs(log_dir, exist_ok=True)

        self.metrics = defaultdict(list)
        self.csv_path = os.path.join(log_dir, self.FILENAME)
        self.csv_fieldnames: List[str] = []
        if os.path.exists(self.csv_path):
            with open(self.csv_path, "r", newline="") as f:
                self.csv_fieldnames = list(csv.DictReader(f).fieldnames or [])
        self.csv_file = open(self.csv_path, "a", newline="")

    def log_dict(self, metrics_dict: Dict[str, Any]) -> None:
        """
        Log one run.

        Args:
            metrics_dict: Dictionary of metric names to values
        """
        new_fields = [key for key in metrics_dict if key not in self.csv_fieldnames]
        if new_fields:
            self.csv_fieldnames.extend(new_fields)
            self._rewrite_header()

        writer = csv.DictWriter(self.csv_file, fieldnames=self.csv_fieldnames)
        writer.writerow({field: metrics_dict.get(field) for field in self.csv_fieldnames})
        self.csv_file.flush()

        for key, value in metrics_dict.items():
            self.metrics[key].append(value)

    def _rewrite_header(self) -> None:
        # Existing rows are rewritten under the widened header.
        self.csv_file.close()
        existing_data = []
        if os.path.getsize(self.csv_path) > 0:
            with open(self.csv_path, "r", newline="") as f:
                existing_data = list(csv.DictReader(f))

        self.csv_file = open(self.csv_path, "w", newline="")
        writer = csv.DictWriter(self.csv_file, fieldnames=self.csv_fieldnames)
        writer.writeheader()
        for row in existing_data:
            writer.writerow({field: row.get(field) for field in self.csv_fieldnames})
        self.csv_file.flush()

    def get_metric(self, key: str) -> List[Any]:
        """
        Get all values logged for a metric in this session.

        Args:
            key: Metric name

        Returns:
            List of values
        """
        return self.metrics.get(key, [])

    def close(self) -> None:
        """Close the CSV file."""
        if self.csv_file:
            self.csv_file.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
