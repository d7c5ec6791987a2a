"""Service layer: commands, handlers and the message bus."""
