"""Creational patterns."""
