"""BuoyView screens."""
