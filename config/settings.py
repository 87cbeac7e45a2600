"""Application settings and configuration."""

import os
from pathlib import Path

# Base directory
BASE_DIR = Path(__file__).parent.parent

# Data paths
DATA_DIR = BASE_DIR / "data"
CROP_DATA_FILE = Path(os.getenv("CROP_DATA_FILE", DATA_DIR / "conab_coffee_2018_2026.csv"))

# Trend projection settings
ANALYTICS_SETTINGS = {
    "reference_year": int(os.getenv("REFERENCE_YEAR", "2026")),
    "default_horizon": 3,
    "band_width": 0.08,  # +/- share of the fitted value
    "base_confidence": 0.85,
    "confidence_decay": 0.05,  # per forecast step
}

# Biennial bearing (alternating high/low crop) correction
BIENNIAL_SETTINGS = {
    "high_year_factor": 1.15,  # even target years
    "low_year_factor": 0.85,  # odd target years
    "crop_markers": ("arabica", "arábica"),
    "rescale_bounds": os.getenv("BIENNIAL_RESCALE_BOUNDS", "false").lower() == "true",
}

# Tukey fence outlier detection
ANOMALY_SETTINGS = {
    "min_records": 4,
    "iqr_multiplier": 1.5,
}

# Volatility above this share marks a series as cyclic
TREND_SETTINGS = {
    "cyclic_volatility_threshold": 15.0,
}

RECOMMENDATION_SETTINGS = {
    # Region-level rules
    "min_bags_per_hectare": 20.0,
    "irrigation_region_groups": ("NORTH", "NORTHEAST"),
    "high_productivity": 3000.0,
    "nitrogen_per_kg": 0.12,
    # Record-level rules
    "low_productivity": 1500.0,
    "large_area": 500.0,
    "medium_productivity": 2500.0,
}

# Ingestion integrity checks
VALIDATION_SETTINGS = {
    "min_year": 1990,
    "max_year": 2026,
    "max_productivity": 10000.0,
}

# API settings
API_SETTINGS = {
    "title": "Coffee Crop Analytics API",
    "description": "Trend projections, regional efficiency and anomaly flags over CONAB coffee data",
    "version": "1.0.0",
}

LOG_SETTINGS = {
    "level": os.getenv("LOG_LEVEL", "INFO").upper(),
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}
