"""Conversions between ORM entities and transfer objects."""
