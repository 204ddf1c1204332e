"""Packaged resources for the qualifier flow."""
