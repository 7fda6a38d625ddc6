"""Synapse framework documentation site."""
