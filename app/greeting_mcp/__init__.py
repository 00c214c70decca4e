"""
Greeting MCP Server.

This MCP server provides LLMs with a handful of small tools: localized
greetings, a calculator, the current time in any timezone and text-to-image
generation, plus a server-info resource and a code review prompt.
"""

__version__ = "1.0.0"

SERVER_NAME = "greeting-server"
