"""Shared models, exceptions, logging and metrics for the schema data generator."""
