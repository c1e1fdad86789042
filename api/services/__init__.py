"""
High-level use cases for the person records API.

Services orchestrate the repository and mappers to implement the business
rules (random batch creation, paging, filtering). Routers call these services
instead of opening database sessions directly.
"""
