"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2).
- El dominio no conoce subprocess, CLI, ni variables de entorno: solo conceptos
  del problema (arquitecturas, parámetros de receta, plan de bootstrap).
"""
