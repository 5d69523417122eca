"""Presentation Layer."""
