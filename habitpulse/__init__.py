"""habitpulse — habit state and derivation engine."""
