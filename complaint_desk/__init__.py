"""Complaint triage and analytics back office."""

from .app import create_app

__all__ = ["create_app"]
