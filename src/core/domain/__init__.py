"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras e inmutables (Pydantic v2) y la
  taxonomía de errores.
- El dominio no conoce httpx, rich ni typer: solo conceptos de request/response.
"""
