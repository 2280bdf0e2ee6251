"""Runtime support shared by the container modules."""
