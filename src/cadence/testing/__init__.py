"""Testing – in-memory doubles for the scheduler's ports."""
