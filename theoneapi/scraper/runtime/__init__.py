"""Runtime layer: HTTP transport and the pagination loop."""
