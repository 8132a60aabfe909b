"""Domain layer — commands, validation primitives, and error contracts.

Pure logic with no knowledge of services, plugins, or the CLI.
"""
