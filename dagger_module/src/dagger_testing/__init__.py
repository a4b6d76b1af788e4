"""Dagger CI functions for the hello API."""

from .main import DaggerTesting as DaggerTesting
