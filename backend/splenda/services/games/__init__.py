"""Game domain services: catalog, coin ledger, rules and turn sequencing.

This package holds the move-processing engine. HTTP routes import
``GameService`` from ``service``; nothing in here knows about requests or
responses. Submodules are imported directly to keep model imports lazy.
"""
