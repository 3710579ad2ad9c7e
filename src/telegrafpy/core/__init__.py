"""Core domain: field values, points, encoding and ports."""
