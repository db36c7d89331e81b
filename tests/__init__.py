"""
Test Suite
==========

Unit and integration tests for the SVG MCP server.

- unit: rasterizer, encoder, output packager, conversion service, tool dispatcher
- integration: MCP server shell
"""
