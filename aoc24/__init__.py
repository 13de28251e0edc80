"""Advent of Code 2024 solvers with grid, graph and parser helpers."""

__version__ = "0.1.0"