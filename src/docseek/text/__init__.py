"""Tokenizing and stemming."""
