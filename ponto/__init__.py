"""Ponto - personal time-clock tracker."""

__version__ = "0.1.0"
