"""Synthetic Sharpe-ratio guessing game."""
