"""Utility helpers for netvoyager."""
