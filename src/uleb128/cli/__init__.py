"""Command-line interface for uleb128."""
