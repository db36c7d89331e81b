"""
Data Models
===========

Pydantic models for tool requests, conversion results and output formats.
"""
