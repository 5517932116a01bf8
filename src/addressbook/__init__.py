"""Personal contact management with emergency contacts."""
