"""Domain layer: pure values and ports, no I/O."""
