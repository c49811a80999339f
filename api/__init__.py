"""HTTP service exposing the phrase comparison engine."""
