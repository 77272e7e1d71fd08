"""Shared configuration constants."""
