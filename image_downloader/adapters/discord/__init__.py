"""Discord adapters."""
