"""Hunt-the-Wumpus style grid world."""
