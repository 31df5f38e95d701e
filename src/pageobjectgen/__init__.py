"""Generate Selenium page object classes from a web page's interactive elements."""

__version__ = "0.1.0"
