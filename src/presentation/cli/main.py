"""CLI interface for coffee crop analytics."""

import argparse
import logging
import sys

from ...application.services.crop_analytics_service import CropAnalyticsService
from ...infrastructure.repositories.conab_csv_repository import ConabCsvRepository

from config.settings import (
    CROP_DATA_FILE,
    ANALYTICS_SETTINGS,
    BIENNIAL_SETTINGS,
    ANOMALY_SETTINGS,
    TREND_SETTINGS,
    RECOMMENDATION_SETTINGS,
    VALIDATION_SETTINGS,
    LOG_SETTINGS,
)

logger = logging.getLogger(__name__)


def build_service(data_file: str) -> CropAnalyticsService:
    return CropAnalyticsService(
        repository=ConabCsvRepository(data_file),
        analytics_settings=ANALYTICS_SETTINGS,
        biennial_settings=BIENNIAL_SETTINGS,
        anomaly_settings=ANOMALY_SETTINGS,
        trend_settings=TREND_SETTINGS,
        recommendation_settings=RECOMMENDATION_SETTINGS,
        validation_settings=VALIDATION_SETTINGS,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Coffee Crop Analytics (CONAB series)")
    parser.add_argument(
        "--data-file", type=str, default=str(CROP_DATA_FILE), help="CSV/XLSX crop records"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    summary_parser = subparsers.add_parser("summary", help="Headline production indicators")
    summary_parser.add_argument("--year", type=int, action="append", default=[], help="Repeatable")
    summary_parser.add_argument(
        "--region", type=str, action="append", default=[], help="State code, repeatable"
    )

    project_parser = subparsers.add_parser(
        "project", help="Project a state's production with biennial adjustment"
    )
    project_parser.add_argument("--region", type=str, required=True, help="e.g. 'MG'")
    project_parser.add_argument(
        "--horizon", type=int, default=ANALYTICS_SETTINGS["default_horizon"], help="Years ahead"
    )

    efficiency_parser = subparsers.add_parser("efficiency", help="Rank states by efficiency")
    efficiency_parser.add_argument(
        "--year", type=int, default=ANALYTICS_SETTINGS["reference_year"], help="Reference year"
    )

    anomalies_parser = subparsers.add_parser("anomalies", help="Outlier harvests of a state")
    anomalies_parser.add_argument("--region", type=str, required=True)

    trends_parser = subparsers.add_parser("trends", help="Volatility of a state's production")
    trends_parser.add_argument("--region", type=str, required=True)

    recommend_parser = subparsers.add_parser("recommend", help="Agronomic recommendations")
    target = recommend_parser.add_mutually_exclusive_group(required=True)
    target.add_argument("--region", type=str, help="Recommendations for a state")
    target.add_argument("--record-id", type=str, help="Recommendations for a single record")

    subparsers.add_parser("validate", help="Check the dataset for impossible values")
    return parser


def run(args: argparse.Namespace, service: CropAnalyticsService) -> int:
    """Execute a parsed command and print its report. Returns the exit code."""
    if args.command == "summary":
        summary = service.summary(years=args.year, region_codes=args.region)
        print(f" Records:          {summary.record_count}")
        print(f" Total production: {summary.total_production:,.0f} thousand bags")
        print(f" Avg productivity: {summary.avg_productivity:,.2f} kg/ha")
        print(f" Total area:       {summary.total_area:,.0f} thousand ha")
        for code, production in summary.production_by_region.items():
            print(f"  • {code}: {production:,.0f}")

    elif args.command == "project":
        predictions = service.project_region(args.region, args.horizon)
        if not predictions:
            print(f"Not enough history to project {args.region}")
            return 0
        print("=" * 60)
        print(f" PRODUCTION PROJECTION: {args.region.upper()} ")
        print("=" * 60)
        for p in predictions:
            print(
                f" {p.target_year}: {p.predicted_value:,.1f} "
                f"[{p.lower_bound:,.1f} - {p.upper_bound:,.1f}] "
                f"growth {p.growth_rate_percent:+.2f}% confidence {p.confidence_score:.2f}"
            )
        print("-" * 60)
        for note in predictions[-1].derivation_notes:
            print(f"  {note}")

    elif args.command == "efficiency":
        entries = service.efficiency_matrix(args.year)
        if not entries:
            print(f"No records for {args.year}")
            return 0
        for e in entries:
            print(
                f" #{e.rank:<2} {e.region_code} ({e.region_group.value}): "
                f"index {e.efficiency_index:.3f}, {e.avg_productivity:,.0f} kg/ha, "
                f"{e.anomaly_count} anomalies"
            )

    elif args.command == "anomalies":
        anomalies = service.region_anomalies(args.region)
        print(f"{len(anomalies)} anomalous harvests in {args.region.upper()}")
        for record in anomalies:
            print(f"  • {record.year}: {record.production:,.0f} thousand bags")

    elif args.command == "trends":
        trends = service.region_trends(args.region)
        print(f" Volatility: {trends.volatility_percent:.2f}%")
        print(f" Direction:  {trends.direction.value}")
        print(f" Cyclic:     {'yes' if trends.is_cyclic else 'no'}")

    elif args.command == "recommend":
        if args.region:
            recommendations = service.region_recommendations(args.region)
        else:
            recommendations = service.record_recommendations(args.record_id)
        for line in recommendations:
            print(f"  • {line}")

    elif args.command == "validate":
        report = service.validate()
        if report.is_valid:
            print("Dataset is valid")
            return 0
        for error in report.errors:
            print(f"  {error}")
        return 1

    return 0


def main(argv=None):
    logging.basicConfig(
        level=LOG_SETTINGS["level"],
        format=LOG_SETTINGS["format"],
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    args = build_parser().parse_args(argv)

    try:
        service = build_service(args.data_file)
    except Exception as e:
        logger.error(f"Failed to initialize service: {e}")
        sys.exit(1)

    try:
        exit_code = run(args, service)
    except Exception as e:
        logger.error(f"Command '{args.command}' failed: {e}", exc_info=True)
        sys.exit(1)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
