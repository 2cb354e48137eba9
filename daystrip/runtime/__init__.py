"""Day strip runtime implementations."""
