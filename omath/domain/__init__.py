"""Angle domain: units, numeric helpers and tolerance policy."""
