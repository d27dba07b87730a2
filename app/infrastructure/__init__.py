"""Infrastructure: persistence adapters behind the application interfaces."""
