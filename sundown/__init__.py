"""
Core package for the sundown tracker dashboard.

Submodules provide the city dataset, sunset computation, search filtering,
and user interface rendering helpers that are orchestrated by the top-level
`app.py`.
"""
