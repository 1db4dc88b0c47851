"""Adapters – bindings to concrete network clients."""
