"""Presentation service package."""
