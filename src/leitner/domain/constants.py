"""Centralized constants for the Leitner scheduler.

All magic numbers and configuration defaults live here so every layer
imports from a single source of truth.
"""

# ---------- Buckets ----------
START_BUCKET = 0

# ---------- Hints ----------
HINT_PLACEHOLDER = "_"

# ---------- Progress ----------
MAX_HARDEST_CARDS = 3

# ---------- Snapshot files ----------
YAML_SUFFIXES = (".yaml", ".yml")
JSON_SUFFIXES = (".json",)
