"""Parsers for Claude conversation log files."""
