"""Write iOS ``Localizable.strings`` files from parsed translations."""

__version__ = "0.3.0"
