"""Servicios del Core: pipeline de países y estado de búsqueda."""
