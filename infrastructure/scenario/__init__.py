# infrastructure/scenario/__init__.py
from infrastructure.scenario.catalog import DEFAULT_SCENARIOS_DIR, ScenarioCatalog
from infrastructure.scenario.file_finder import ScenarioFileFinder
from infrastructure.scenario.yaml_loader import ScenarioLoadError, YamlScenarioLoader

__all__ = [
    "DEFAULT_SCENARIOS_DIR",
    "ScenarioCatalog",
    "ScenarioFileFinder",
    "ScenarioLoadError",
    "YamlScenarioLoader",
]
