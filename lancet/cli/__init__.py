"""Command line interface for Lancet."""
