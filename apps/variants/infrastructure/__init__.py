"""Variants Infrastructure Layer."""
