"""Coil Monetize Content: admin screens and options."""
