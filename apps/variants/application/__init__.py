"""Variants Application Layer."""
