"""Bounded contexts of the showdelta pipeline."""
