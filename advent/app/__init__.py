"""Puzzle registry and run harness."""
