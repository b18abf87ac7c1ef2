"""Formulation names, network operations and their validation for optimizing over neural networks."""

__version__ = "0.1.0"