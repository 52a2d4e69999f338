"""
External system integrations (TMDb).

Metadata clients live under this namespace so they remain decoupled from the
CLI entrypoint.
"""
