"""Application layer – search use cases over in-memory room lists."""
