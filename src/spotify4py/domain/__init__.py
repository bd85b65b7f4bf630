"""Domain layer: immutable records, enums, errors and results."""
