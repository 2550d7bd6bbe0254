"""Solvers and their configuration."""
