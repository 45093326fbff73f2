"""CardCatalog: read-only HTTP API over a pre-built trading-card catalog."""
