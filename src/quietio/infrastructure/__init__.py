"""Infrastructure: best-effort I/O and destination adapters."""
