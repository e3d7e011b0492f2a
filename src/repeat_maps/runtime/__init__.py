"""Runtime services shared by the table builder."""
