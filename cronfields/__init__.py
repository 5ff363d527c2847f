"""cronfields - expand a standard cron expression into the values of each field."""

__version__ = "0.1.0"
