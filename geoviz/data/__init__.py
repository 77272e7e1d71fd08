"""Point-set loading, saving and generation."""
