"""CSV export of mood entries."""

import csv
from pathlib import Path

from .models import MoodEntry
from .storage import EntryStore

CSV_HEADER = ["Date", "Mood", "Reflection", "Tags"]


class CSVExporter:
    """Export all entries, unfiltered, to a CSV file."""

    def __init__(self, store: EntryStore):
        self.store = store

    def export_csv(self, output_path: Path) -> int:
        """Write entries to CSV, overwriting output_path.

        The header line is unquoted; every data field is double-quoted with
        internal quotes doubled. An empty store writes nothing.

        Args:
            output_path: Output file path

        Returns:
            Number of entries exported
        """
        entries = self.store.load()
        if not entries:
            return 0

        output_path = Path(output_path).expanduser()
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w", newline="", encoding="utf-8") as f:
            f.write(",".join(CSV_HEADER) + "\n")
            writer = csv.writer(f, quoting=csv.QUOTE_ALL, lineterminator="\n")
            for entry in entries:
                writer.writerow(self._row(entry))

        return len(entries)

    @staticmethod
    def _row(entry: MoodEntry) -> list[str]:
        return [entry.local_date(), entry.mood, entry.note, ", ".join(entry.tags)]
