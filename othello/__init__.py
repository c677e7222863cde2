"""Othello move selection by depth-bounded minimax."""
