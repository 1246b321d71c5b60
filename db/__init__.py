"""
db/ - Database Layer
====================
Handles the SQLAlchemy engine and session lifecycle, the ORM table models,
and schema initialization.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
