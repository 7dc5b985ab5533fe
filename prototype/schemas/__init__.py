"""Pydantic schemas package.

Folder intent:
  common.py  — HealthResponse returned by /health
"""
