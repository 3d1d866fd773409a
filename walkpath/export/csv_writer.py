"""CSV export of generated walker paths."""

import csv
from pathlib import Path
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..model.simulation import Simulation


class CSVWriter:
    """
    Writes every waypoint of a simulation to CSV.

    Output format:
        walker_id,step,x,y
        0,0,-3.21,7.05
        ...
    """

    FIELDNAMES = ['walker_id', 'step', 'x', 'y']

    def __init__(self, output_path: Path):
        self.output_path = Path(output_path)
        self.file: Optional[object] = None
        self.writer: Optional[csv.DictWriter] = None
        self._is_open = False

    def open(self) -> None:
        """Create the file and write the header."""
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        self.file = open(self.output_path, 'w', newline='')
        self.writer = csv.DictWriter(self.file, fieldnames=self.FIELDNAMES)
        self.writer.writeheader()
        self._is_open = True

    def append(self, simulation: "Simulation") -> int:
        """Write all current waypoints; returns the number of rows written."""
        if not self._is_open:
            self.open()
        rows = simulation.to_csv_rows()
        self.writer.writerows(rows)
        self.file.flush()
        return len(rows)

    def close(self) -> None:
        if self.file:
            self.file.close()
            self.file = None
            self.writer = None
            self._is_open = False

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
