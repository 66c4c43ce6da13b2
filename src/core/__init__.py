"""Core: dominio, configuración, contratos y servicios (sin I/O de UI)."""
