# infrastructure/scenario/catalog.py
from __future__ import annotations

from importlib.resources import files
from pathlib import Path
from typing import Dict, List, Optional

from domain.scenario import Scenario
from infrastructure.scenario.file_finder import ScenarioFileFinder
from infrastructure.scenario.yaml_loader import ScenarioLoadError, YamlScenarioLoader

# bundled trigger scenarios, shipped as package data
DEFAULT_SCENARIOS_DIR = Path(str(files("infrastructure.scenario").joinpath("triggers")))


class ScenarioCatalog:
    """
    Every trigger scenario found under a directory, keyed by meta.name.
    Files are loaded on first access.
    """

    def __init__(self, base_dir: Optional[Path] = None, loader: Optional[YamlScenarioLoader] = None):
        self._finder = ScenarioFileFinder(Path(base_dir) if base_dir else DEFAULT_SCENARIOS_DIR)
        self._loader = loader or YamlScenarioLoader()
        self._scenarios: Optional[Dict[str, Scenario]] = None

    @classmethod
    def from_scenarios(cls, scenarios: List[Scenario]) -> "ScenarioCatalog":
        catalog = cls()
        catalog._scenarios = catalog._index(scenarios, sources=[s.name for s in scenarios])
        return catalog

    def names(self) -> List[str]:
        return sorted(self._all())

    def get(self, name: str) -> Optional[Scenario]:
        return self._all().get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._all()

    def __len__(self) -> int:
        return len(self._all())

    def _all(self) -> Dict[str, Scenario]:
        if self._scenarios is None:
            paths = self._finder.find_all()
            if not paths:
                raise ScenarioLoadError(f"No scenario files found under {self._finder.base_dir}")
            scenarios = [self._loader.load_from_file(p) for p in paths]
            self._scenarios = self._index(scenarios, sources=[str(p) for p in paths])
        return self._scenarios

    def _index(self, scenarios: List[Scenario], sources: List[str]) -> Dict[str, Scenario]:
        out: Dict[str, Scenario] = {}
        origin: Dict[str, str] = {}
        for scenario, source in zip(scenarios, sources):
            if scenario.name in out:
                raise ScenarioLoadError(
                    f"Duplicate trigger name {scenario.name!r}: {origin[scenario.name]} and {source}"
                )
            out[scenario.name] = scenario
            origin[scenario.name] = source
        return out
