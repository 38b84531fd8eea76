"""The framework for rendering the forms of the broker management console."""

__version__ = '0.1.0'
