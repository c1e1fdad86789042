"""Pydantic transport schemas."""
