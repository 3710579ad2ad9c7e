"""Wire encoders for points."""
