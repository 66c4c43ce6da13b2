"""Adaptadores de infraestructura: HTTP, fuente REST Countries y exportadores."""
