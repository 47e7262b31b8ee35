"""Settings and logging shared by the calculator modules."""
