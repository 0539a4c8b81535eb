"""Core: domain, interfaces, services and configuration. No CLI code here."""
