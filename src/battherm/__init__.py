"""Battery thermometer: live and long-term battery temperature charts."""

__version__ = "0.1.0"
