"""Command validators: whitelist and field checks per resource."""
