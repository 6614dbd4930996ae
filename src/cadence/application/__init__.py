"""Application – recurring-job scheduling use cases."""
