"""Core components for the semver-isvalid application.

This package contains the building blocks of the checking pipeline: the
outcome model, the base class for all gates, the configuration manager, and
the function that runs the gates in order.
"""
