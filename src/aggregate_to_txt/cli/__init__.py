"""Command-line interface for aggregate_to_txt."""
