#!/usr/bin/env python3
"""
check_scenarios.py - Validate a scenario dataset before serving it.

Loads the YAML file through the same loader the app uses and reports
per-category counts and empty-looking snippets.

Usage:
  python scripts/check_scenarios.py
  python scripts/check_scenarios.py --scenarios data/my_scenarios.yaml
"""

import argparse
import logging
import sys
from collections import Counter
from pathlib import Path

# Project root for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from dotenv import load_dotenv
load_dotenv(PROJECT_ROOT / ".env")

from logicaudit.classroom import ScenarioDataset, load_scenarios, DEFAULT_SCENARIOS_PATH
from logicaudit.errors import DatasetError

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def find_issues(dataset: ScenarioDataset) -> list[str]:
    """Find scenarios whose snippets would render badly."""
    issues = []
    for idx, record in enumerate(dataset):
        if not record.bad_code.strip():
            issues.append(f"Scenario {idx + 1} (id={record.id}): blank bad_code")
        if not record.good_code.strip():
            issues.append(f"Scenario {idx + 1} (id={record.id}): blank good_code")
        if record.bad_code == record.good_code:
            issues.append(f"Scenario {idx + 1} (id={record.id}): bad_code equals good_code")
    return issues


def main():
    parser = argparse.ArgumentParser(
        description="Validate a Logic Auditor scenario dataset",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        "--scenarios",
        type=Path,
        default=DEFAULT_SCENARIOS_PATH,
        help="Path to scenarios YAML file"
    )

    args = parser.parse_args()

    logger.info(f"Loading scenarios from {args.scenarios}...")
    try:
        dataset = load_scenarios(args.scenarios)
    except (FileNotFoundError, DatasetError) as e:
        logger.error(f"Failed: {e}")
        sys.exit(1)

    counts = Counter(dataset.categories())
    logger.info(f"Scenarios: {len(dataset)}")
    logger.info(f"Categories: {len(counts)}")
    for category, count in counts.most_common():
        logger.info(f"  {category}: {count}")

    issues = find_issues(dataset)
    if issues:
        logger.warning(f"Issues found: {len(issues)}")
        for issue in issues:
            logger.warning(f"  - {issue}")
        sys.exit(1)


if __name__ == "__main__":
    main()
