"""Precomputed queries: q1.sql for odd registration numbers, q2.sql for even."""
