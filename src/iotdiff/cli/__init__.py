"""Command line interface for iotdiff."""
