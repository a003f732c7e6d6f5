"""debug-mcp: template-backed prompts for tool-calling hosts."""
