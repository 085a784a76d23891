"""Toolkit-independent view models: year and sound lists, example models, actions and shortcuts."""

__version__ = "1.4.0"