"""UNECE code lists."""
