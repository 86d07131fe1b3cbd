# File: demos/run_portal_method.py
"""
DEMO: PORTAL METHOD ANALYSIS OF A MULTI-STORY FRAME
===================================================

PURPOSE:
--------
Run the Portal Method on a frame described in a JSON file (or the default
2-story, 2-bay frame) and print the per-story summary and member forces.

INPUT FORMAT (JSON, stories listed top to bottom):
--------------------------------------------------
    {
      "storyHeights": [3, 3],
      "structureType": "REGULAR",
      "spansPerStory": [2, 2],
      "spanMeasurements": [[4, 4], [4, 4]],
      "lateralLoads": [10, 10]
    }

EXAMPLE USAGE:
--------------
    python demos/run_portal_method.py
    python demos/run_portal_method.py --input frame.json --out artifacts
    python demos/run_portal_method.py --accumulation cumulative --precision 3
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path

import pandas as pd

sys.path.insert(0, str(Path(__file__).parent.parent))

from portal_method import Structure, ValidationError, analyze, check_input_limits, default_structure
from portal_method.config import CONFIG
from portal_method.report import results_table, round_results, story_summary, results_to_csv, results_to_json


logger = logging.getLogger(__name__)


def load_structure(path):
    """Read a Structure from a JSON file, or return the default frame."""
    if path is None:
        return default_structure()
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValidationError("structure", f"expected a JSON object, got {type(data).__name__}")
    return Structure.from_dict(data)


def build_parser():
    parser = argparse.ArgumentParser(
        description='Portal Method analysis of a multi-story, multi-bay frame',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python demos/run_portal_method.py
  python demos/run_portal_method.py --input frame.json --out artifacts

With --out this will generate:
  - <out>/portal_results.csv (member forces)
  - <out>/portal_results.json (structure + results)
        """
    )
    parser.add_argument('--input', type=str, default=None,
                        help='JSON structure file (default: built-in 2-story frame)')
    parser.add_argument('--accumulation', choices=CONFIG.accumulation_modes,
                        default=CONFIG.default_accumulation,
                        help='Joint accumulation rule (default: adjacent)')
    parser.add_argument('--precision', type=int, default=CONFIG.display_precision,
                        help='Decimals for displayed results (default: 2)')
    parser.add_argument('--no-limits', action='store_true',
                        help='Skip the input-form limits (max stories / bays)')
    parser.add_argument('--out', type=str, default=None,
                        help='Directory to write CSV and JSON results')
    parser.add_argument('--verbose', action='store_true', help='Debug logging')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        structure = load_structure(args.input)
        if not args.no_limits:
            check_input_limits(structure)
        grid = analyze(structure, args.accumulation)
    except (OSError, KeyError, json.JSONDecodeError) as e:
        logger.error("Could not read structure: %s", e)
        return 2
    except ValidationError as e:
        logger.error("Invalid structure: %s", e)
        return 2

    logger.debug("Analyzed %d stories with %s accumulation", structure.story_count, args.accumulation)

    print("=" * 70)
    print("PORTAL METHOD ANALYSIS")
    print("=" * 70)
    print(f"Stories: {structure.story_count}   Bays: {list(structure.spans_per_story)}   "
          f"Type: {structure.structure_type}")
    print()

    with pd.option_context("display.width", 120, "display.max_columns", 20):
        print("STORY SUMMARY")
        print("-" * 70)
        rounded = round_results(grid, args.precision)
        print(story_summary(structure, rounded).to_string(index=False))
        print()
        print("MEMBER FORCES")
        print("-" * 70)
        table = results_table(structure, rounded)
        print(table.to_string(index=False, na_rep=""))
        print()

    if args.out:
        os.makedirs(args.out, exist_ok=True)
        csv_path = os.path.join(args.out, "portal_results.csv")
        json_path = os.path.join(args.out, "portal_results.json")
        with open(csv_path, "w", encoding="utf-8", newline="") as f:
            f.write(results_to_csv(structure, grid, args.precision))
        with open(json_path, "w", encoding="utf-8") as f:
            f.write(results_to_json(structure, grid, args.precision))
        logger.info("Wrote %s and %s", csv_path, json_path)

    return 0


if __name__ == "__main__":
    sys.exit(main())
