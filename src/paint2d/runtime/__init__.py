"""Runtime services shared by the painter."""
