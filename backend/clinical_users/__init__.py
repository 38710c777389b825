"""Clinical user service: persistence core and integration-test fixtures."""

__version__ = "0.1.0"
__author__ = "Clinical Users Team"

__all__ = ["__version__", "__author__"]
