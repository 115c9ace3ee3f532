"""Desktop client for learning IR codes through the Broadlink binding's HTTP service."""

__version__ = "0.1.0"
