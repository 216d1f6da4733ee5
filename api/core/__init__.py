"""
Core utilities shared across the users API.

Configuration (env vars), logging setup and HTTP middleware live here so
routers and services do not read os.environ or configure handlers directly.
"""
