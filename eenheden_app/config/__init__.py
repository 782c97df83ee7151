"""Layered configuration: dataclass defaults, settings.yaml, per-call overrides."""
