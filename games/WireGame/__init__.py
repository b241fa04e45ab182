"""Wire game: steer through a generated corridor to the goal without
touching the walls."""
