"""Aggregation of per-seed simulation results (average time, car count)."""
