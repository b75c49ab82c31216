"""Skill Service - REST API for managing skills."""

__version__ = "0.1.0"
