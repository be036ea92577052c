"""Integrations with hosting protocols."""
