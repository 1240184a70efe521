"""
Pydantic schema definitions for API payloads.

Request and response models live here, separate from the registry in
``services`` so that the wire representation can evolve independently
of how contacts are stored.
"""
