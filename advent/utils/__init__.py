"""Helpers shared by the puzzle solvers: inputs, memoization, synthetic mazes."""
