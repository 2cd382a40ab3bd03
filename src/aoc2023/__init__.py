"""Advent of Code 2023 puzzle solvers."""
