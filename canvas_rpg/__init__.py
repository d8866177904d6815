"""Canvas RPG front end: screen flow, input translation and frame simulation."""
