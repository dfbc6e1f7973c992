"""HealthTrack wellness-tracking backend."""
