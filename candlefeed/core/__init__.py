"""Core library: models, services, providers and their ambient plumbing."""
