"""Text-mode views."""
