"""devmetrics: developer metrics dashboard with a semi-donut arc geometry engine."""

__version__ = "0.1.0"
