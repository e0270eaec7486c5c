"""Search Filter Compiler service."""
