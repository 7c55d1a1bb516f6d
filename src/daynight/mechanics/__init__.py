"""Pure time, parsing and lighting rules — no I/O."""
