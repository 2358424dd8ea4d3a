"""Text front end for the blackjack engine."""
