"""Find scenario files on disk."""
from pathlib import Path
from typing import List

SCENARIO_SUFFIXES = (".yaml", ".yml")


class ScenarioFileFinder:
    """Search scenario files under the given base directory."""

    def __init__(self, base_dir: Path):
        self.base_dir = Path(base_dir)

    def find_all(self) -> List[Path]:
        """Every scenario file under base_dir, sorted by path."""
        if not self.base_dir.is_dir():
            return []
        found = [
            p for p in self.base_dir.rglob("*")
            if p.is_file() and p.suffix.lower() in SCENARIO_SUFFIXES
        ]
        return sorted(found, key=str)
