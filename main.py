"""Property Ranker — score rental listings against weighted preferences.

Usage:
    python main.py                                # Score data/properties.json with the default criteria
    python main.py --criteria criteria.json       # Use a weighted criteria request
    python main.py --output scored.json --top 10  # Write results and log the top 10
    python main.py --stats                        # Also log collection statistics
"""

import argparse
import logging
import sys
from datetime import datetime

from config.settings import Settings
from models.criteria import WeightedCriteria
from scoring.ranking import score_properties
from scoring.stats import compute_stats
from sources.json_source import (
    CriteriaError,
    PropertySourceError,
    dump_scored,
    load_criteria,
    load_properties,
)

logger = logging.getLogger("property_ranker")


def resolve_criteria(criteria_file: str, settings: Settings) -> WeightedCriteria:
    """Load the criteria file if one is given, otherwise fall back to the defaults."""
    if criteria_file:
        criteria = load_criteria(criteria_file)
        logger.info(f"Loaded criteria from {criteria_file}")
    else:
        criteria = settings.default_criteria
        logger.info("No criteria file given, using default criteria")

    if criteria.is_empty():
        logger.warning("Criteria set is empty, every property will score 0")
    return criteria


def log_stats(properties) -> None:
    stats = compute_stats(properties)
    logger.info(
        f"Stats: {stats.total} properties, average £{stats.average_price:.2f}, "
        f"{stats.student_properties} student, {stats.with_garden} with garden"
    )
    logger.info(f"  Types: {stats.property_types}")
    logger.info(f"  Bedrooms: {stats.bedroom_distribution}")


def main(
    properties_file: str | None = None,
    criteria_file: str | None = None,
    output_file: str | None = None,
    top_n: int | None = None,
    show_stats: bool = False,
) -> None:
    settings = Settings()

    # Set up logging
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    properties_file = properties_file or settings.properties_file
    criteria_file = criteria_file if criteria_file is not None else settings.criteria_file
    output_file = output_file if output_file is not None else settings.output_file
    top_n = top_n if top_n is not None else settings.top_n

    # Phase 1: Load
    try:
        properties = load_properties(properties_file)
        criteria = resolve_criteria(criteria_file, settings)
    except (PropertySourceError, CriteriaError) as e:
        logger.error(str(e))
        sys.exit(1)

    if show_stats:
        log_stats(properties)

    # Phase 2: Score and rank
    scored = score_properties(properties, criteria)

    # Phase 3: Report
    for s in scored[:top_n]:
        logger.info(f"  {s.summary_line()}")
        logger.debug(f"    {s.breakdown_str()}")

    if output_file:
        dump_scored(scored, output_file)

    logger.info(f"Run finished at {datetime.now().isoformat()}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Rank rental properties by weighted preferences")
    parser.add_argument(
        "--properties",
        type=str,
        default=None,
        help="JSON file of property records (default: PROPERTIES_FILE or data/properties.json)",
    )
    parser.add_argument(
        "--criteria",
        type=str,
        default=None,
        help="JSON file holding a weighted criteria request",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write scored properties to this JSON file",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=None,
        help="Number of top results to log",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Log collection statistics before scoring",
    )
    args = parser.parse_args()
    main(
        properties_file=args.properties,
        criteria_file=args.criteria,
        output_file=args.output,
        top_n=args.top,
        show_stats=args.stats,
    )
