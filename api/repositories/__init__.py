"""
Persistence adapters.

Today users live in process memory only. Services depend on the repository
methods (insert/find/update/delete) rather than touching the underlying dict.
"""
