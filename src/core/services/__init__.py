"""Application services: candidate generation, fan-out search, lookup."""
