"""
Output Packaging
================

Delivery of encoded images as emitted files or inline base64 payloads.
"""
