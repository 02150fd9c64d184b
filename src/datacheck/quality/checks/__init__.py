"""Check functions, one module per family of expectations."""
