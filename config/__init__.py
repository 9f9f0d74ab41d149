"""Configuration: environment loading, settings and the LLM factory."""
