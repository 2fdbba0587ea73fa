"""Rotor Schedule: today's offshore helicopter flights from several operators."""
