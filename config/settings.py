from pydantic_settings import BaseSettings

from models.criteria import (
    GardenCriterion,
    MinCountCriterion,
    PriceCriterion,
    WeightedCriteria,
)


def _default_criteria() -> WeightedCriteria:
    # Starting values of the filter panel
    return WeightedCriteria(
        max_price=PriceCriterion(value=1500, weight=5),
        min_bedrooms=MinCountCriterion(value=2, weight=5),
        min_bathrooms=MinCountCriterion(value=1, weight=3),
        has_garden=GardenCriterion(weight=3),
    )


class Settings(BaseSettings):
    # Input / output
    properties_file: str = "data/properties.json"
    criteria_file: str = ""
    output_file: str = ""

    # Used when no criteria file is given
    default_criteria: WeightedCriteria = _default_criteria()

    # Reporting
    top_n: int = 20

    # Logging
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}
