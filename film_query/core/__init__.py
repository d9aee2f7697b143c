"""Core building blocks shared by the Film Query server: database layer, logging, monitoring and errors."""
