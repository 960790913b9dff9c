"""Transport layers that expose the grammar corrector."""
