"""HTTP transport for Haus games."""
