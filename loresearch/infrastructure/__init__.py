"""Infrastructure adapters: store persistence and its errors."""
