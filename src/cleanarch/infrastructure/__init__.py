"""Infrastructure layer: filesystem discovery, AST parsing, logging, CLI, pytest plugin."""
