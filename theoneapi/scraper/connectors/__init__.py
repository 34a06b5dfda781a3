"""Upstream connectors."""
