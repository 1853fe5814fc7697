"""
Tuning loader - discovers and loads tuning configurations.

Tunings can come from:
1. Built-in library (shipped with package)
2. Project tunings (user's project/tunings directory)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from chuk_mcp_harmony.constants import ErrorMessages
from chuk_mcp_harmony.core.tuning import TuningConfiguration

logger = logging.getLogger(__name__)


class TuningLoader:
    """
    Discovers and loads tuning definitions.

    Tunings are loaded from YAML files in the library and project directories.
    Project tunings override library tunings with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the tuning loader.

        Args:
            library_path: Path to built-in tuning library
            project_path: Path to project tunings directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, TuningConfiguration] = {}

    def list_tunings(self) -> list[TuningConfiguration]:
        """
        List all available tunings, project tunings taking precedence.
        """
        tunings: dict[str, TuningConfiguration] = {}

        for directory in (self.library_path, self.project_path):
            if directory is None or not directory.exists():
                continue
            for path in sorted(directory.glob("*.yaml")):
                tuning = self._load_tuning_file(path)
                if tuning:
                    tunings[tuning.name] = tuning

        return list(tunings.values())

    def get_tuning(self, name: str) -> TuningConfiguration | None:
        """
        Get a tuning by name.

        Project tunings take precedence over library tunings.

        Args:
            name: Tuning name

        Returns:
            TuningConfiguration if found, None otherwise
        """
        if name in self._cache:
            return self._cache[name]

        for directory in (self.project_path, self.library_path):
            if directory is None:
                continue
            path = directory / f"{name}.yaml"
            if path.exists():
                tuning = self._load_tuning_file(path)
                if tuning:
                    self._cache[name] = tuning
                    return tuning

        return None

    def require_tuning(self, name: str) -> TuningConfiguration:
        """
        Get a tuning by name, failing loudly when it does not exist.

        Raises:
            ValueError: If no tuning with that name can be loaded
        """
        tuning = self.get_tuning(name)
        if tuning is None:
            raise ValueError(ErrorMessages.TUNING_NOT_FOUND.format(name=name))
        return tuning

    def _load_tuning_file(self, path: Path) -> TuningConfiguration | None:
        """Load a tuning from a YAML file, skipping files that do not parse."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
            return self._parse_tuning(data, default_name=path.stem)
        except (OSError, yaml.YAMLError, ValidationError, AttributeError) as e:
            logger.warning("Skipping invalid tuning file %s: %s", path, e)
            return None

    def _parse_tuning(self, data: dict[str, Any], default_name: str) -> TuningConfiguration:
        """Parse a tuning from YAML data."""
        reference = data.get("reference", {})
        approximation = data.get("approximation", {})
        spelling = data.get("spelling", {})

        values: dict[str, Any] = {
            "name": data.get("name", default_name),
            "description": data.get("description", ""),
            "reference_pitch": reference.get("pitch"),
            "reference_frequency": reference.get("frequency"),
            "tolerance_cents": approximation.get("tolerance_cents"),
            "perceptual_limit_cents": approximation.get("perceptual_limit_cents"),
            "prefer_flats": spelling.get("prefer_flats"),
        }
        # Missing keys fall back to the model defaults
        return TuningConfiguration(**{k: v for k, v in values.items() if v is not None})

    def clear_cache(self) -> None:
        """Clear the tuning cache."""
        self._cache.clear()
