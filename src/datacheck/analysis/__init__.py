"""Statistical analysis primitives: statistics, correlation, drift, timestamps."""
