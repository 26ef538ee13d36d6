"""Runtime services (telemetry) shared by the editor core."""
