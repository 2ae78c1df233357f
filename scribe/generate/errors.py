class ConfigurationError(ValueError):
    """Raised before any network activity when a GenerationConfig is unusable."""
