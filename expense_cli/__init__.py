"""Command line front end for the expense tracker."""

__version__ = "0.1.0"
