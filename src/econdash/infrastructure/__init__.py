"""Infrastructure layer: configuration, providers, catalog and containers."""
