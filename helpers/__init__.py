"""Pure helper functions."""
