"""Seed an evops deployment with demo users, tags and events."""

__version__ = "0.1.0"
