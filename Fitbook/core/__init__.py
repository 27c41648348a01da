"""
Core utilities package for Fitbook
Contains shared utilities used across all modules
"""
