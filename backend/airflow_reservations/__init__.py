"""
Airflow Reservations: flight reservation data layer.

This package provides the relational schema, entity records and repositories
for a small airline reservation system:
1. Schema and reference data (users, airplanes, cities, flights, seats, reservations)
2. One repository per entity with create/read/update/delete and filtered lookups
3. Services adding flight validation, atomic seat booking and password hashing
"""

__version__ = "0.1.0"
