"""Export a BigCommerce product catalog to a local JSON file."""

__version__ = "0.1.0"
