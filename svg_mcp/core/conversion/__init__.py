"""
Conversion Service
==================

Reusable library surface orchestrating render, encode and package steps.
"""
