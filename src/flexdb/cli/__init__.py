"""Command-line interface for FlexDB."""
