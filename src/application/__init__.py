"""Application layer: intents, handlers, dispatcher, services and settings."""
