"""Reusable BuoyView widgets."""
