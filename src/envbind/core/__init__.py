"""The field-binding engine."""
