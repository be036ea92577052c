"""Foundation layer: configuration, errors and core tool abstractions."""
