"""Cache core: storage, clocks, stats and logging."""
