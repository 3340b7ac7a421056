"""
Service layer for business logic.

Keeps input validation and DTO conversion out of the repositories
and out of the interactive menu.
"""
