"""Console human-resources system: employees, sectors, time clock and text data files."""

__version__ = "1.0.0"