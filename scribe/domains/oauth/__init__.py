"""OAuth domain: signing engine, token extractors, services, and the service builder."""
