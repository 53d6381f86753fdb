"""Example graph collaborator, random number generation and graph persistence."""
