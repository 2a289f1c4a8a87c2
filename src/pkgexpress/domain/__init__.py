"""Shipping rules, pricing, and the states a quote passes through.

This layer depends only on stdlib and pydantic.
It must never import from services, output, config, or the CLI.
"""
