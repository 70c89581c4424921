"""Shipped YAML configuration (config.yaml, factory_defaults.yaml)."""
