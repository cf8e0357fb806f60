"""HTTP service for the yield optimizer."""
