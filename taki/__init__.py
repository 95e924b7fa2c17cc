"""Taki card game."""
