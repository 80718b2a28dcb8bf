"""Blueprint dell'applicazione."""
