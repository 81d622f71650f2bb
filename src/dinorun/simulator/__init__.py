"""Desktop simulator for DINORUN (pygame)."""
