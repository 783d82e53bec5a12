"""Text-generation provider clients."""
