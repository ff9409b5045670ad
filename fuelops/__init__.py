"""
Core package for the FuelOps station dashboard.

Submodules provide the in-memory station records, the assistant integration,
and user interface rendering helpers that are orchestrated by the top-level
`app.py`.
"""
