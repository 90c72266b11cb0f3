"""IR — Result models and enums shared across the pipeline."""
