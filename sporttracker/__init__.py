"""SportTracker - cached multi-sport reference data aggregated from TheSportsDB."""

__version__ = "1.0.0"
