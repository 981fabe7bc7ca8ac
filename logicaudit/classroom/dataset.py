"""
ScenarioDataset - Read-only access to the code review scenarios.

Provides:
- Loading scenarios from a YAML file
- Bounds-checked lookup by index
- Category listing for navigation
"""

import logging
from pathlib import Path
from typing import Iterator, Optional, Sequence

import yaml
from pydantic import ValidationError

from logicaudit.errors import DatasetError, ScenarioIndexError
from logicaudit.schemas import ScenarioRecord


logger = logging.getLogger(__name__)

DEFAULT_SCENARIOS_PATH = Path(__file__).parent.parent / "data" / "scenarios.yaml"


class ScenarioDataset:
    """
    Ordered, immutable sequence of scenarios.

    The dataset is loaded once and never mutated. Lookups outside
    [0, N-1] raise ScenarioIndexError; negative indices are not wrapped.
    """

    def __init__(self, records: Sequence[ScenarioRecord]):
        """
        Initialize dataset.

        Args:
            records: Scenarios in display order (must be non-empty)
        """
        if not records:
            raise DatasetError("Scenario dataset is empty")
        self._records: tuple[ScenarioRecord, ...] = tuple(records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ScenarioRecord]:
        return iter(self._records)

    def get(self, index: int) -> ScenarioRecord:
        """Get the scenario at a position in display order."""
        if not 0 <= index < len(self._records):
            raise ScenarioIndexError(index, len(self._records))
        return self._records[index]

    def categories(self) -> list[str]:
        """Get category labels in display order (one per scenario)."""
        return [record.category for record in self._records]


def load_scenarios(path: Optional[Path] = None) -> ScenarioDataset:
    """
    Load and validate a scenario dataset.

    Args:
        path: YAML file with a top-level ``scenarios`` list
              (default: bundled scenarios.yaml)

    Returns:
        ScenarioDataset in file order

    Raises:
        FileNotFoundError: If the file doesn't exist
        DatasetError: If the file is not a valid scenario list
    """
    file_path = Path(path) if path else DEFAULT_SCENARIOS_PATH

    if not file_path.exists():
        raise FileNotFoundError(f"Scenario file not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise DatasetError(f"Invalid YAML in {file_path}: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("scenarios"), list):
        raise DatasetError(f"Expected a top-level 'scenarios' list in {file_path}")

    try:
        records = [ScenarioRecord(**entry) for entry in data["scenarios"]]
    except (TypeError, ValidationError) as e:
        raise DatasetError(f"Invalid scenario in {file_path}: {e}") from e

    dataset = ScenarioDataset(records)
    logger.info(f"Loaded {len(dataset)} scenarios from {file_path}")
    return dataset
