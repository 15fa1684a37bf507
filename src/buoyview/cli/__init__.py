"""BuoyView command line — ``buoyview``."""
