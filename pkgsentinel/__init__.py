"""Reconcile declared package versions against installed ones."""

__version__ = "0.1.0"
