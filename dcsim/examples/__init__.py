"""Runnable demo circuits."""
