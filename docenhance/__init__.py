# (c) Copyright Datacraft, 2026
"""Enhancement strategy selection for visual documents."""
