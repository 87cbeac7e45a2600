"""Example usage of the coffee crop analytics."""

import logging
from src.application.services.crop_analytics_service import CropAnalyticsService
from src.infrastructure.repositories.conab_csv_repository import ConabCsvRepository
from config.settings import (
    CROP_DATA_FILE,
    ANALYTICS_SETTINGS,
    BIENNIAL_SETTINGS,
    ANOMALY_SETTINGS,
)

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def main():
    """Example usage."""
    service = CropAnalyticsService(
        repository=ConabCsvRepository(str(CROP_DATA_FILE)),
        analytics_settings=ANALYTICS_SETTINGS,
        biennial_settings=BIENNIAL_SETTINGS,
        anomaly_settings=ANOMALY_SETTINGS,
    )

    # Example 1: Regional efficiency ranking
    print("=" * 60)
    print("Example 1: Regional efficiency ranking")
    print("=" * 60)
    for entry in service.efficiency_matrix():
        print(
            f"  #{entry.rank} {entry.region_code}: index {entry.efficiency_index:.3f} "
            f"({entry.anomaly_count} anomalies)"
        )

    # Example 2: Projection for Minas Gerais
    print("\n" + "=" * 60)
    print("Example 2: Production projection for MG")
    print("=" * 60)
    for prediction in service.project_region("MG", horizon=4):
        print(
            f"  {prediction.target_year}: {prediction.predicted_value:,.1f} thousand bags "
            f"(confidence {prediction.confidence_score:.2f})"
        )

    # Example 3: Recommendations
    print("\n" + "=" * 60)
    print("Example 3: Recommendations for BA")
    print("=" * 60)
    for line in service.region_recommendations("BA"):
        print(f"  • {line}")


if __name__ == "__main__":
    main()
