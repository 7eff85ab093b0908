"""Schema node model, documents, reader and linter."""
