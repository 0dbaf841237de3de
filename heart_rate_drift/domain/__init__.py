"""Pure computations over activity data."""
