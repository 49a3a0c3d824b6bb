"""Data access functions, one module per entity."""
