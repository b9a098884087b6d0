"""Variants Presentation Layer."""
