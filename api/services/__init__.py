"""
High-level use cases for the users API.

Each service module orchestrates repositories to implement business rules
(field validation, id parsing, existence checks). Routers call these services
instead of manipulating the repository directly.
"""
