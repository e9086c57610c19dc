"""LibHub library lending platform."""
