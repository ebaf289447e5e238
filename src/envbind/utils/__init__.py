"""Helpers for the command line tool."""
