"""
Water Quality Visualizer v1.0.0

Desktop tool for exploring water-quality monitoring data.  Loads a CSV
of readings, infers which columns are numeric, charts any selection of
parameters across a date or category axis, and scores every monitoring
site with a simplified Water Quality Index (WQI).

The core (``csv_parser``, ``schema``, ``grouping``, ``series_builder``,
``wqi``, ``summary_stats``) has no GUI dependency and can be used on
its own.
"""

APP_NAME = "Water Quality Visualizer"
APP_VERSION = "1.0.0"
__version__ = APP_VERSION
